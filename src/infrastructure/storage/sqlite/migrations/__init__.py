"""Schema migrations for the record database."""

from src.infrastructure.storage.sqlite.migrations.migrator import (
    IntegrityCheck,
    MigrationFile,
    MigrationOutcome,
    MigrationStatus,
    check_schema,
    discover_migrations,
    migrate,
    migration_status,
    run_migrations,
)

__all__ = [
    "IntegrityCheck",
    "MigrationFile",
    "MigrationOutcome",
    "MigrationStatus",
    "check_schema",
    "discover_migrations",
    "migrate",
    "migration_status",
    "run_migrations",
]
