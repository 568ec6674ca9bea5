"""
Shared pytest fixtures.

The database is pointed at a throwaway SQLite file before the app is
imported, and the schema is rebuilt for every test.
"""
import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="contact_inbox_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from core.setup import Base, database  # noqa: E402
from main import app  # noqa: E402
from service.auth import TokenManager  # noqa: E402


def make_token(role: str, user_id: str = "user-1", **extra) -> str:
    payload = {"user_id": user_id, "name": "Test Caller", "email": "caller@example.com", "role": role}
    payload.update(extra)
    return TokenManager.create_access_token(payload)


@pytest.fixture(autouse=True)
def fresh_db():
    engine = database.get_engine
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {make_token('admin', user_id='admin-1')}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {make_token('user')}"}


@pytest.fixture
def valid_form():
    return {
        "name": "Ana Silva",
        "email": "ana@example.com",
        "message": "Preciso de ajuda urgente",
    }


@pytest.fixture
def token_factory():
    return make_token
