"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.identity import IIdGenerator
from src.core.interfaces.record_store import IRecordStore

__all__ = [
    # Storage interfaces
    "IRecordStore",
    # Identity interfaces
    "IIdGenerator",
]
