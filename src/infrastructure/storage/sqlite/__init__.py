"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_pool,
)
from src.infrastructure.storage.sqlite.record_store import SQLiteRecordStore

# Singleton instances
_record_store: SQLiteRecordStore | None = None


async def get_record_store() -> SQLiteRecordStore:
    """Get singleton record store instance."""
    global _record_store
    if _record_store is None:
        _record_store = SQLiteRecordStore()
    return _record_store


def reset_record_store() -> None:
    """Drop the singleton (for testing)."""
    global _record_store
    _record_store = None


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    # Store classes
    "SQLiteRecordStore",
    # Factory functions
    "get_record_store",
    "reset_record_store",
]
