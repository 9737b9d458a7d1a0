"""
Service layer for business logic.
"""
from zipauth.services.account_service import AccountService

__all__ = [
    "AccountService",
]
