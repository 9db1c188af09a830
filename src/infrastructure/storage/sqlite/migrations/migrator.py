"""
Versioned schema migrations for the record database.

Migration files live next to this module and are named
``v{NNN}_{name}.sql``. Each applied file is recorded in
``schema_migrations`` with a checksum of its contents. The database file
is copied aside before anything is applied and copied back when a
migration fails.
"""

import argparse
import asyncio
import hashlib
import re
import shutil
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import aiosqlite

from src.config import get_logger, get_settings

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent
REQUIRED_TABLES = ("records", "schema_migrations")

_FILENAME = re.compile(r"v(\d+)_(.+)\.sql")


@dataclass(frozen=True)
class MigrationFile:
    """One ``v{NNN}_{name}.sql`` script."""

    version: str
    name: str
    path: Path
    checksum: str

    @classmethod
    def load(cls, path: Path) -> "MigrationFile":
        match = _FILENAME.fullmatch(path.name)
        if not match:
            raise ValueError(f"Invalid migration filename: {path.name}")
        digest = hashlib.sha256(path.read_bytes()).hexdigest()
        return cls(version=match[1], name=match[2], path=path, checksum=digest[:16])


@dataclass
class MigrationOutcome:
    """What happened when one migration ran."""

    version: str
    name: str
    success: bool
    duration_ms: int
    error: str | None = None


@dataclass
class MigrationStatus:
    """Applied and pending versions of a database file."""

    exists: bool
    current_version: str | None = None
    applied: list[str] = field(default_factory=list)
    pending: list[str] = field(default_factory=list)


@dataclass
class IntegrityCheck:
    """A single schema check; ``detail`` explains a failure."""

    name: str
    passed: bool
    detail: str = ""


def discover_migrations(directory: Path | None = None) -> list[MigrationFile]:
    """Migration files in version order; misnamed files are skipped."""
    found = []
    for path in sorted((directory or MIGRATIONS_DIR).glob("v*.sql")):
        try:
            found.append(MigrationFile.load(path))
        except ValueError:
            logger.warning("migration_file_skipped", path=str(path))
    return found


async def read_applied(conn: aiosqlite.Connection) -> dict[str, str]:
    """Applied versions mapped to their checksums; empty on a new database."""
    try:
        cursor = await conn.execute("SELECT version, checksum FROM schema_migrations")
    except aiosqlite.OperationalError:
        return {}
    return {row[0]: row[1] for row in await cursor.fetchall()}


async def current_version(conn: aiosqlite.Connection) -> str | None:
    applied = await read_applied(conn)
    return max(applied) if applied else None


def pending_migrations(
    applied: dict[str, str],
    available: Sequence[MigrationFile],
) -> list[MigrationFile]:
    """Files not yet applied. A changed checksum on an applied file is only logged."""
    pending = []
    for migration in available:
        recorded = applied.get(migration.version)
        if recorded is None:
            pending.append(migration)
        elif recorded != migration.checksum:
            logger.warning("migration_checksum_changed", version=migration.version)
    return pending


async def apply_migration(
    conn: aiosqlite.Connection,
    migration: MigrationFile,
) -> MigrationOutcome:
    """Run one script and record it. Driver errors are returned, not raised."""
    started = time.perf_counter()

    def elapsed() -> int:
        return int((time.perf_counter() - started) * 1000)

    try:
        await conn.executescript(migration.path.read_text(encoding="utf-8"))
        await conn.execute(
            "INSERT OR REPLACE INTO schema_migrations "
            "(version, name, checksum, execution_time_ms) VALUES (?, ?, ?, ?)",
            (migration.version, migration.name, migration.checksum, elapsed()),
        )
        await conn.commit()
    except aiosqlite.Error as e:
        await conn.rollback()
        logger.error("migration_failed", version=migration.version, error=str(e))
        return MigrationOutcome(migration.version, migration.name, False, elapsed(), str(e))

    logger.info("migration_applied", version=migration.version, name=migration.name)
    return MigrationOutcome(migration.version, migration.name, True, elapsed())


def backup_database(db_path: Path) -> Path:
    """Copy the database file aside and return the copy's path."""
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = db_path.with_suffix(f".backup_{stamp}.db")
    shutil.copy2(db_path, backup_path)
    logger.info("database_backup_created", backup_path=str(backup_path))
    return backup_path


def restore_database(db_path: Path, backup_path: Path) -> None:
    shutil.copy2(backup_path, db_path)
    logger.warning("database_restored_from_backup", backup_path=str(backup_path))


async def migrate(
    db_path: Path | None = None,
    backup: bool = True,
    directory: Path | None = None,
) -> list[MigrationOutcome]:
    """
    Apply every pending migration, stopping at the first failure.

    Args:
        db_path: Database file (default from settings). Created if missing.
        backup: Copy an existing file aside first and restore it on failure.
        directory: Where to look for migration files.

    Returns:
        One outcome per migration attempted; empty when up to date.
    """
    db_path = db_path or get_settings().storage.db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)

    backup_path = backup_database(db_path) if backup and db_path.exists() else None
    outcomes: list[MigrationOutcome] = []

    try:
        async with aiosqlite.connect(db_path) as conn:
            await conn.execute("PRAGMA journal_mode=WAL")
            todo = pending_migrations(await read_applied(conn), discover_migrations(directory))
            for migration in todo:
                outcome = await apply_migration(conn, migration)
                outcomes.append(outcome)
                if not outcome.success:
                    break
    except Exception:
        if backup_path is not None:
            restore_database(db_path, backup_path)
        raise

    failed = any(not o.success for o in outcomes)
    if backup_path is not None:
        if failed:
            restore_database(db_path, backup_path)
        else:
            backup_path.unlink()

    logger.info(
        "database_migrated",
        db_path=str(db_path),
        applied=sum(1 for o in outcomes if o.success),
        failed=failed,
    )
    return outcomes


# Name used by the application lifespan
run_migrations = migrate


async def migration_status(db_path: Path | None = None) -> MigrationStatus:
    db_path = db_path or get_settings().storage.db_path
    if not db_path.exists():
        return MigrationStatus(exists=False, pending=[m.version for m in discover_migrations()])

    async with aiosqlite.connect(db_path) as conn:
        applied = await read_applied(conn)

    return MigrationStatus(
        exists=True,
        current_version=max(applied) if applied else None,
        applied=sorted(applied),
        pending=[m.version for m in pending_migrations(applied, discover_migrations())],
    )


async def check_schema(db_path: Path | None = None) -> list[IntegrityCheck]:
    """SQLite integrity check plus presence of the tables the store needs."""
    db_path = db_path or get_settings().storage.db_path

    async with aiosqlite.connect(db_path) as conn:
        cursor = await conn.execute("PRAGMA integrity_check")
        (integrity,) = await cursor.fetchone()
        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        tables = {row[0] for row in await cursor.fetchall()}

    missing = [t for t in REQUIRED_TABLES if t not in tables]
    return [
        IntegrityCheck("integrity", integrity == "ok", "" if integrity == "ok" else integrity),
        IntegrityCheck("required_tables", not missing, ", ".join(missing)),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """``python -m src.infrastructure.storage.sqlite.migrations.migrator migrate|status|verify``"""
    parser = argparse.ArgumentParser(description="Invoicing database migrations")
    parser.add_argument("--db-path", type=Path, help="Database path (default from settings)")
    commands = parser.add_subparsers(dest="command", required=True)
    migrate_cmd = commands.add_parser("migrate", help="Apply pending migrations")
    migrate_cmd.add_argument("--no-backup", action="store_true", help="Skip the backup copy")
    commands.add_parser("status", help="Show applied and pending versions")
    commands.add_parser("verify", help="Check schema integrity")
    args = parser.parse_args(argv)

    if args.command == "status":
        status = asyncio.run(migration_status(args.db_path))
        print(f"exists: {status.exists}")
        print(f"current: {status.current_version or '-'}")
        print(f"applied: {', '.join(status.applied) or '-'}")
        print(f"pending: {', '.join(status.pending) or '-'}")
        return 0

    if args.command == "verify":
        checks = asyncio.run(check_schema(args.db_path))
        for check in checks:
            print(f"[{'PASS' if check.passed else 'FAIL'}] {check.name} {check.detail}".rstrip())
        return 0 if all(c.passed for c in checks) else 1

    outcomes = asyncio.run(migrate(args.db_path, backup=not args.no_backup))
    for outcome in outcomes:
        state = "ok" if outcome.success else f"FAILED: {outcome.error}"
        print(f"v{outcome.version} {outcome.name} ({outcome.duration_ms}ms) {state}")
    return 0 if all(o.success for o in outcomes) else 1


if __name__ == "__main__":
    raise SystemExit(main())
