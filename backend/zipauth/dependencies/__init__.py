"""
Dependencies for dependency injection in routes.
"""
from zipauth.dependencies.accounts import (
    AccountServiceDep,
    SessionCookie,
    get_account_repository,
    get_account_service,
    get_session_cookie,
)

__all__ = [
    "AccountServiceDep",
    "SessionCookie",
    "get_account_repository",
    "get_account_service",
    "get_session_cookie",
]
