"""
Persistence layer.
"""
from zipauth.repositories.accounts import AccountRepository, MongoAccountRepository

__all__ = [
    "AccountRepository",
    "MongoAccountRepository",
]
