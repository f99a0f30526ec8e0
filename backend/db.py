"""
Database setup for the FastAPI backend.
Provides SQLAlchemy engine/session utilities; SQLite unless configured otherwise.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()
logger = logging.getLogger(__name__)


def make_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # check_same_thread=False allows usage across FastAPI threads
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker:
    # expire_on_commit=False keeps entities readable after the scope commits
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create tables if they don't exist."""
    from repositories import models  # noqa: F401  Ensures models are registered

    Base.metadata.create_all(bind=engine)


def ping(engine: Engine) -> bool:
    """Return True when the store answers a trivial query."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("Database health check failed")
        return False


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """
    Run a unit of work in one transaction.

    Commits when the block exits normally, rolls back and re-raises on any
    exception, and always closes the session.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
