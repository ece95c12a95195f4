from typing import Generator
from contextlib import contextmanager

from app.config import settings
from app.database.session import SQLALCHEMY_DATABASE_URL, get_local_session
from app.log import get_logger

log = get_logger(__name__)


SessionLocal = get_local_session(SQLALCHEMY_DATABASE_URL, settings.DB_ECHO)


def get_db() -> Generator:  # pragma: no cover
    """
    Returns a generator that yields a database session

    Yields:
        Session: A database session object.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_ctx_db(session_factory=None) -> Generator:
    """
    Context manager that creates a database session and yields
    it for use in a 'with' statement.

    Parameters:
        session_factory (sessionmaker): Factory to open the session from.
        Defaults to the application's ``SessionLocal``.

    Yields:
        Generator: A database session.
    """
    db = (session_factory or SessionLocal)()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
