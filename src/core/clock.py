"""Time source shared by entities and services."""

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current moment as an aware UTC datetime."""
    return datetime.now(UTC)
