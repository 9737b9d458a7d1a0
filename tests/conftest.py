"""
Global test fixtures for zipline-auth.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Test account data
- FastAPI test client wired to the mock database
"""

import sys
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest.fixture
def mock_accounts_db(mock_async_mongo_client):
    """Provide the mock accounts database (no indexes yet)."""
    return mock_async_mongo_client["zipline"]


@pytest_asyncio.fixture
async def account_repository(mock_accounts_db):
    """MongoAccountRepository on the mock database, indexes created."""
    from zipauth.repositories.accounts import MongoAccountRepository

    repository = MongoAccountRepository(mock_accounts_db)
    await repository.ensure_indexes()
    yield repository


# =============================================================================
# Account Fixtures
# =============================================================================

@pytest.fixture
def alice_credentials() -> dict:
    """Basic account data for creation and login."""
    return {
        "username": "alice",
        "password": "secret1",
    }


@pytest.fixture
def admin_credentials() -> dict:
    """Administrator account data."""
    return {
        "username": "root",
        "password": "AdminPassword123!",
        "administrator": True,
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Create FastAPI app for testing."""
    from zipauth.main import app
    return app


@pytest.fixture
def client(app, mock_accounts_db) -> Generator:
    """
    Create a TestClient whose routes and lifespan use the mock database.

    Entering the client runs the lifespan, which creates the unique
    username index on the mock database.
    """
    from zipauth.dependencies.accounts import get_account_repository
    from zipauth.repositories.accounts import MongoAccountRepository

    async def _get_database(db_name=None):
        return mock_accounts_db

    async def _get_repository():
        return MongoAccountRepository(mock_accounts_db)

    app.dependency_overrides[get_account_repository] = _get_repository
    with patch("zipauth.main.get_database", _get_database):
        with TestClient(app) as c:
            yield c
    app.dependency_overrides.clear()
