"""
Shared test configuration.

Puts server/ on sys.path so the flat modules (main, database, api, core,
models) import the same way they do when the server runs from that directory,
and gives every test a fresh in-memory database.
"""

import os
import sys

_server_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "server"))
if _server_dir not in sys.path:
    sys.path.insert(0, _server_dir)

os.environ["DB_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_db, make_engine
from main import app
from models import Base


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


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
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def alice(client):
    res = client.post("/api/users", json={"username": "alice"})
    assert res.status_code == 200
    return res.json()
