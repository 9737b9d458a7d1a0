"""
Request dependencies: session cookie, repository and service wiring.
"""
from typing import Annotated, Optional

from fastapi import Depends, Request

from zipauth.config import Settings, get_settings
from zipauth.database.connections import get_database
from zipauth.repositories.accounts import AccountRepository, MongoAccountRepository
from zipauth.services.account_service import AccountService


def get_session_cookie(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Optional[str]:
    """Return the raw session cookie value, or None when absent."""
    return request.cookies.get(settings.cookie_name) or None


async def get_account_repository() -> AccountRepository:
    """Dependency to get the MongoDB account repository."""
    db = await get_database()
    return MongoAccountRepository(db)


def get_account_service(
    repository: Annotated[AccountRepository, Depends(get_account_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AccountService:
    """Dependency to get an AccountService instance."""
    return AccountService(repository, settings)


# Type aliases for cleaner route signatures
SessionCookie = Annotated[Optional[str], Depends(get_session_cookie)]
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
