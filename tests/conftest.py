import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.main import create_app

from helpers import add_post, register


@pytest.fixture
def settings(tmp_path):
    return Settings(
        SECRET_KEY="test-secret",
        DATABASE_URL="sqlite://",
        BCRYPT_ROUNDS=4,
        UPLOAD_DIRECTORY=str(tmp_path / "uploads"),
        ENVIRONMENT="test",
    )


@pytest.fixture
def engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def app(settings, engine):
    return create_app(settings=settings, engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def alice(client):
    return register(client, "alice", location="Tashkent", birthdate="1999-04-01")


@pytest.fixture
def bob(client):
    return register(client, "bob")


@pytest.fixture
def post_id(client, alice):
    return add_post(client, alice, "hello")
