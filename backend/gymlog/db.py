from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .settings import get_settings


def make_engine(url: str) -> Engine:
    """Postgres in deployments; sqlite files for local runs and the test suite."""
    if url.startswith("sqlite"):
        # FastAPI runs sync routes in a threadpool, so one connection can cross threads
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


engine = make_engine(get_settings().DATABASE_URL)

# users and sets both hang off this metadata
class Base(DeclarativeBase):
    pass

# One Session per request; every repository write commits on its own
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db() -> None:
    """Create missing tables straight from the models (local dev / tests; prod uses alembic)."""
    from gymlog import models  # noqa: F401  # registers tables on Base.metadata
    Base.metadata.create_all(bind=engine)
