"""
Database module - MongoDB connection handling.
"""
from zipauth.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
]
