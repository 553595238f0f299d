# tests/conftest.py

import pytest
from dotenv import load_dotenv
import httpx
from fastapi.testclient import TestClient
import sys
import os

# Add project root to path to ensure imports work
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app import create_app
from app.client.api import ConfessionsAPI
from app.client.state import ConfessionWall
from app.core.database import create_db_engine, init_db
from app.core.store import InMemoryConfessionStore, SQLConfessionStore


@pytest.fixture(autouse=True)
def load_test_env():
    """Load test environment variables for all tests"""
    load_dotenv("tests/test.env")


@pytest.fixture
def store():
    """Fresh in-memory confession store."""
    return InMemoryConfessionStore()


@pytest.fixture
def sql_store(tmp_path):
    """SQL store on a throwaway SQLite file."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'confessions.db'}")
    init_db(engine)
    yield SQLConfessionStore(engine)
    engine.dispose()


@pytest.fixture
def app(store):
    """Create application for testing."""
    return create_app(store=store)


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return TestClient(app)


@pytest.fixture
def api(app):
    """Client API wired straight to the app, no network involved."""
    transport = httpx.ASGITransport(app=app)
    return ConfessionsAPI(
        base_url="http://testserver",
        client=httpx.AsyncClient(transport=transport, base_url="http://testserver"),
    )


@pytest.fixture
def wall(api):
    return ConfessionWall(api)


@pytest.fixture
def seed(store):
    """Insert confessions straight into the store and return their ids."""

    def _seed(*messages, likes=0):
        ids = []
        for message in messages:
            row = store.insert_row({"confession": message, "like": likes})[0]
            ids.append(row["id"])
        return ids

    return _seed
