"""
SQLAlchemy engine and session factory.
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from jobportal.core.config import settings


def build_engine(database_url: str):
    """Create an engine, applying the SQLite options FastAPI needs."""
    url = make_url(database_url)
    kwargs = {}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(url, **kwargs)


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db() -> Generator[Session, None, None]:
    """Yield a session per request; use in FastAPI `Depends(get_db)`."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
