"""
API routers.
"""
from zipauth.routers import accounts, health

__all__ = ["accounts", "health"]
