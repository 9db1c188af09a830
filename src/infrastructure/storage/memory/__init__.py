"""In-memory storage implementations."""

from src.infrastructure.storage.memory.record_store import InMemoryRecordStore

__all__ = ["InMemoryRecordStore"]
