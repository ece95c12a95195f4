import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient

from app.database.base_class import Base
from app.database.db import get_db
from app.database.session import get_local_session
from app.main import app
from app.model.badges import Badge
from app.model.completions import Completion


@pytest.fixture
def session_factory():
    factory = get_local_session("sqlite:///:memory:")
    Base.metadata.create_all(bind=factory.kw["bind"])
    yield factory
    factory.kw["bind"].dispose()


@pytest.fixture
def broken_session_factory():
    """Sessions on a database with no tables; every statement fails."""
    factory = get_local_session("sqlite:///:memory:")
    yield factory
    factory.kw["bind"].dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def add_completions(db):
    """Insert ``n`` completions for a user at fresh locations."""
    def _add(user_id, n):
        start = db.query(Completion).filter(Completion.user_id == user_id).count()
        db.add_all(
            Completion(user_id=user_id, location_id=f"loc-{i}")
            for i in range(start, start + n)
        )
        db.commit()

    return _add


@pytest.fixture
def badge_names(db):
    """Badge names a user holds, sorted."""
    def _names(user_id):
        return sorted(b.name for b in db.query(Badge).filter(Badge.user_id == user_id))

    return _names
