"""Shared test fixtures for todovault."""

from datetime import datetime, UTC

import pytest

from todovault.auth.hashing import PasswordHasher
from todovault.auth.service import CredentialService
from todovault.auth.session import SessionResolver
from todovault.auth.token import TokenCodec
from todovault.config import Settings
from todovault.core import Core
from todovault.main import create_app
from todovault.store import SharedStore
from todovault.todos.service import TodoService

TEST_SECRET = "test-secret-key-long-enough-for-hs256-signing"


@pytest.fixture
def secret_key():
    """Signing secret shared by the codec and test settings."""
    return TEST_SECRET


@pytest.fixture
def test_settings():
    """Settings with a cheap bcrypt work factor and a known secret."""
    return Settings(
        jwt_secret_key=TEST_SECRET,
        bcrypt_work_factor=4,
        token_expiry_minutes=5,
        todo_id_policy="length",
    )


@pytest.fixture
def fixed_now():
    """A fixed point in time for deterministic token tests."""
    return datetime(2026, 10, 19, 10, 30, 0, tzinfo=UTC)


@pytest.fixture
def store():
    """Fresh empty store (length-based id policy)."""
    return SharedStore()


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def codec():
    return TokenCodec(TEST_SECRET)


@pytest.fixture
def credentials(store, hasher, codec):
    return CredentialService(store, hasher, codec)


@pytest.fixture
def sessions(codec):
    return SessionResolver(codec)


@pytest.fixture
def todo_service(store):
    return TodoService(store)


@pytest.fixture
def core(test_settings):
    return Core(test_settings)


@pytest.fixture
def app(test_settings, core):
    """Flask app with its own isolated Core."""
    flask_app = create_app(test_settings, core=core)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def signed_in_client(client):
    """Test client holding a session cookie for user "alice".

    Returns a tuple of (client, access_token).
    """
    response = client.post("/signup", json={"username": "alice", "password": "pw1"})
    assert response.status_code == 201

    response = client.post("/signin", json={"username": "alice", "password": "pw1"})
    assert response.status_code == 200

    return client, response.get_json()["access_token"]
