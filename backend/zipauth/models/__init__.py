"""
Persisted data models.
"""
from zipauth.models.account import Account

__all__ = ["Account"]
