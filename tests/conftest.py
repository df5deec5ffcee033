"""Pytest configuration and shared fixtures.

Provides an in-memory Motor-compatible database (mongomock-motor) per test
and an httpx client bound to the FastAPI app with the database dependency
overridden. The application lifespan is not run, so no MongoDB server is
needed.
"""

# Set environment variables BEFORE any imports that trigger Settings validation
import os

os.environ.setdefault("DB_URI", "mongodb://localhost:27017/exercise_tracker_test")

import uuid
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from api.dependencies import get_database
from api.main import app


@pytest.fixture
def database():
    """Fresh, isolated database handle for each test."""
    client = AsyncMongoMockClient()
    return client[f"exercise_tracker_{uuid.uuid4().hex}"]


@pytest_asyncio.fixture
async def client(database) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app, backed by the in-memory database."""
    app.dependency_overrides[get_database] = lambda: database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
