"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing the
account service and its HTTP routes.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Default settings (open account creation)."""
    from zipauth.config import Settings
    return Settings()


@pytest.fixture
def account_service(account_repository, settings):
    """AccountService on the mock-backed repository."""
    from zipauth.services.account_service import AccountService
    return AccountService(account_repository, settings)


@pytest_asyncio.fixture
async def alice(account_service, alice_credentials):
    """Create the alice account and return its public view."""
    from zipauth.schemas.account import CreateAccountRequest
    return await account_service.create_account(
        None, CreateAccountRequest(**alice_credentials)
    )


@pytest_asyncio.fixture
async def alice_cookie(account_service, alice, alice_credentials):
    """Session cookie obtained by logging alice in."""
    from zipauth.schemas.account import LoginRequest
    result = await account_service.login(None, LoginRequest(**alice_credentials))
    return result.cookie


@pytest.fixture
def mock_account_repository():
    """
    Create a fully mocked AccountRepository.

    All methods are AsyncMock, allowing you to configure return values:

        mock_account_repository.find_by_username.return_value = None
    """
    repository = MagicMock()
    repository.find_by_id = AsyncMock(return_value=None)
    repository.find_by_username = AsyncMock(return_value=None)
    repository.create = AsyncMock()
    repository.save = AsyncMock()
    return repository


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, kind: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if kind:
            assert data["error"] == kind
    return _assert


@pytest.fixture
def assert_redacted():
    """Helper to assert an account payload carries no password data."""
    def _assert(payload: dict):
        assert "password" not in payload
        assert "password_hash" not in payload
        assert "id" in payload
        assert "username" in payload
    return _assert
