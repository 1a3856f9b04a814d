import logging
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from gymlog.db import get_db
from gymlog.errors import AuthenticationError
from gymlog.schemas.user import UserLogin, TokenRead
from gymlog.security import verify_password, create_access_token, bearer_header
from gymlog.repositories.user_repo import UserRepository

log = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

@router.post("/login", response_model=TokenRead)
def login(payload: UserLogin, response: Response, db: Session = Depends(get_db)):
    user = UserRepository(db).get(payload.username)
    if not user or not user.enabled or not verify_password(payload.password, user.password_hash):
        log.info("login rejected user=%s", payload.username)
        raise AuthenticationError("invalid credentials")
    token = create_access_token(user.username)
    # Clients read the token from the header and send it back as-is
    response.headers["Authorization"] = bearer_header(token)
    log.info("login ok user=%s", user.username)
    return TokenRead(access_token=token)
