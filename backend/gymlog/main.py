# gymlog/main.py
import os
import time
import logging
import uuid
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from gymlog.errors import AuthenticationError, ValidationError
from gymlog.routers.auth import router as auth_router
from gymlog.routers.heartbeat import router as heartbeat_router
from gymlog.routers.sets import router as sets_router
from gymlog.db import SessionLocal, init_db  # SessionLocal for healthz DB check
from gymlog.settings import get_settings

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL.upper())
log = logging.getLogger("uvicorn")

app = FastAPI(
    title="Gymlog API",
    version=settings.API_VERSION,
    openapi_tags=[
        {"name": "auth", "description": "Login & bearer tokens"},
        {"name": "heartbeat", "description": "Authenticated liveness check"},
        {"name": "sets", "description": "Exercise sets owned by the caller"},
    ],
)

if settings.AUTO_CREATE_TABLES:
    init_db()


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Authorization", "X-Request-ID"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request: Request, exc: AuthenticationError):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.detail},
        headers={"WWW-Authenticate": "Bearer"},
    )

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.detail})

# Malformed bodies/params are bad requests here, not FastAPI's default 422
@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": settings.API_VERSION}

# Routers
app.include_router(auth_router)
app.include_router(heartbeat_router)
app.include_router(sets_router)
