import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from scoreboard import models  # noqa: F401
from scoreboard.app import create_app
from scoreboard.core import get_session


@pytest.fixture()
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture()
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine):
    application = create_app()

    def _override_session():
        with Session(engine) as session:
            yield session

    application.dependency_overrides[get_session] = _override_session
    # Not used as a context manager so the lifespan never touches the file database.
    return TestClient(application)


@pytest.fixture()
def signup(client):
    def _signup(username="ann", email="A@x.com", password="secret1"):
        res = client.post(
            "/auth/signup",
            json={"username": username, "email": email, "password": password},
        )
        assert res.status_code == 201, res.text
        return res.json()

    return _signup
