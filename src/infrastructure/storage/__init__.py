"""Storage infrastructure implementations."""

from src.infrastructure.storage.memory import InMemoryRecordStore
from src.infrastructure.storage.sqlite import (
    SQLiteRecordStore,
    close_pool,
    get_pool,
    get_record_store,
)

__all__ = [
    # Record stores
    "SQLiteRecordStore",
    "InMemoryRecordStore",
    "get_record_store",
    # Connection pool
    "get_pool",
    "close_pool",
]
