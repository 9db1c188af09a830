"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from src.infrastructure.storage.sqlite.connection import ConnectionPool
from src.infrastructure.storage.sqlite.migrations.migrator import migrate


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def initialized_db(temp_db_path: Path) -> Path:
    """Temporary database with every migration applied."""
    results = await migrate(temp_db_path, backup=False)
    assert all(r.success for r in results)
    return temp_db_path


@pytest.fixture
async def pool(initialized_db: Path) -> AsyncGenerator[ConnectionPool, None]:
    """Small pool over the migrated database."""
    pool = ConnectionPool(initialized_db, pool_size=2)
    await pool.initialize()
    yield pool
    await pool.close()
