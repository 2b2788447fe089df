# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.db.database import DatabaseHandle
from app.main import create_app
from app.services.database_service import DatabaseService


@pytest.fixture
def database_url(tmp_path):
    """A fresh SQLite file for each test."""
    return f"sqlite:///{tmp_path / 'waitlist_test.db'}"


@pytest.fixture
def db_handle(database_url):
    """A provisioned store: tables created and the challenge catalog seeded."""
    handle = DatabaseHandle(database_url)
    handle.create_schema()
    session = handle.new_session()
    DatabaseService(db_session=session).ensure_challenge_catalog()
    session.close()
    yield handle
    handle.dispose()


@pytest.fixture
def db_service(db_handle):
    """A DatabaseService bound to its own session on the provisioned store."""
    session = db_handle.new_session()
    yield DatabaseService(db_session=session)
    session.close()


@pytest.fixture
def unprovisioned_db_service(database_url):
    """A DatabaseService whose database exists but has no tables."""
    handle = DatabaseHandle(database_url)
    session = handle.new_session()
    yield DatabaseService(db_session=session)
    session.close()
    handle.dispose()


@pytest.fixture
def valid_form():
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "countryCode": "+44",
        "phone": "20 7946 0000",
        "subject": "Machine learning",
        "stayInLoop": "yes",
        "challenges": ["Information Overload", "Limited Time for Learning"],
    }


@pytest.fixture
def client(database_url):
    """An HTTP client against an app wired to a fresh, auto-created store."""
    settings = Settings(DATABASE_URL=database_url, AUTO_CREATE_SCHEMA=True, LOG_LEVEL="WARNING")
    with TestClient(create_app(settings=settings)) as test_client:
        yield test_client


@pytest.fixture
def unconfigured_client():
    settings = Settings(DATABASE_URL="", LOG_LEVEL="WARNING")
    with TestClient(create_app(settings=settings)) as test_client:
        yield test_client
