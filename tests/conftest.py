import os

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

import httpx
import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_http_client
from src.infrastructure.db.models import Base
from src.infrastructure.db.session import SessionLocal, engine
from src.main import app
from tests.fakes import FakeExternalApis


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def external_apis():
    return FakeExternalApis()


@pytest.fixture
def http_client(external_apis):
    with httpx.Client(transport=httpx.MockTransport(external_apis.handler)) as client:
        yield client


@pytest.fixture
def client(http_client):
    app.dependency_overrides[get_http_client] = lambda: http_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def order_payload():
    return {
        "event_id": "003",
        "event_date": "2021-08-21 13:00:00",
        "ticket_adult_price": 700,
        "ticket_adult_quantity": 1,
        "ticket_kid_price": 450,
        "ticket_kid_quantity": 0,
        "user_id": "00451",
    }
