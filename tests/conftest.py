import os
import tempfile

from cryptography.fernet import Fernet

# Environment must be in place before the app modules are imported
_TMP_DIR = tempfile.mkdtemp(prefix="moodjournal-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["FERNET_SECRET"] = Fernet.generate_key().decode()
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient

from moodjournal.main import app
from moodjournal.models import database


@pytest.fixture(autouse=True)
def reset_schema():
    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_session():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def register_user(client, username, email, password="secret123"):
    response = client.post(
        "/api/auth/signup",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def auth_headers(client):
    return register_user(client, "alice", "alice@example.com")


@pytest.fixture
def other_auth_headers(client):
    return register_user(client, "bob", "bob@example.com")
