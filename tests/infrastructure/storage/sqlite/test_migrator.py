"""Tests for the schema migrator."""

from pathlib import Path

import aiosqlite
import pytest

from src.infrastructure.storage.sqlite.migrations.migrator import (
    MigrationFile,
    backup_database,
    check_schema,
    current_version,
    discover_migrations,
    main,
    migrate,
    migration_status,
    pending_migrations,
    read_applied,
    restore_database,
)


def _copy_bundled(target: Path) -> None:
    target.mkdir()
    for migration in discover_migrations():
        (target / migration.path.name).write_text(migration.path.read_text())


class TestMigrationFile:
    def test_load_parses_filename(self, tmp_path: Path):
        path = tmp_path / "v001_initial_schema.sql"
        path.write_text("SELECT 1;")

        migration = MigrationFile.load(path)

        assert migration.version == "001"
        assert migration.name == "initial_schema"
        assert len(migration.checksum) == 16

    def test_checksum_follows_content(self, tmp_path: Path):
        first = tmp_path / "v001_a.sql"
        first.write_text("SELECT 1;")
        second = tmp_path / "v002_b.sql"
        second.write_text("SELECT 2;")

        assert MigrationFile.load(first).checksum != MigrationFile.load(second).checksum

    @pytest.mark.parametrize("filename", ["invalid.sql", "v_no_number.sql", "v001_x.txt"])
    def test_invalid_filename(self, tmp_path: Path, filename: str):
        path = tmp_path / filename
        path.write_text("SELECT 1;")

        with pytest.raises(ValueError, match="Invalid migration filename"):
            MigrationFile.load(path)


class TestDiscovery:
    def test_bundled_migrations(self):
        migrations = discover_migrations()

        assert migrations[0].version == "001"
        assert migrations[0].name == "records"

    def test_skips_misnamed_files(self, tmp_path: Path):
        (tmp_path / "v001_ok.sql").write_text("SELECT 1;")
        (tmp_path / "v_bad.sql").write_text("SELECT 1;")

        assert [m.name for m in discover_migrations(tmp_path)] == ["ok"]

    def test_pending_skips_applied(self, tmp_path: Path):
        (tmp_path / "v001_a.sql").write_text("SELECT 1;")
        (tmp_path / "v002_b.sql").write_text("SELECT 2;")
        available = discover_migrations(tmp_path)

        pending = pending_migrations({"001": "changed-checksum"}, available)

        assert [m.version for m in pending] == ["002"]


class TestMigrate:
    async def test_new_database(self, temp_db_path: Path):
        outcomes = await migrate(temp_db_path, backup=False)

        assert [(o.version, o.success) for o in outcomes] == [("001", True)]
        async with aiosqlite.connect(temp_db_path) as conn:
            assert "001" in await read_applied(conn)
            assert await current_version(conn) == "001"

    async def test_empty_database_has_no_version(self, temp_db_path: Path):
        async with aiosqlite.connect(temp_db_path) as conn:
            assert await read_applied(conn) == {}
            assert await current_version(conn) is None

    async def test_up_to_date_database(self, initialized_db: Path):
        assert await migrate(initialized_db) == []
        assert list(initialized_db.parent.glob("*.backup_*.db")) == []

    async def test_defaults_to_settings_path(self):
        from src.config import get_settings

        outcomes = await migrate(backup=False)

        assert outcomes and all(o.success for o in outcomes)
        assert get_settings().storage.db_path.exists()

    async def test_failure_stops_and_restores(self, initialized_db: Path, tmp_path: Path):
        directory = tmp_path / "migrations"
        _copy_bundled(directory)
        (directory / "v900_broken.sql").write_text("CREATE TABLE records (broken);")
        (directory / "v901_after.sql").write_text("CREATE TABLE later (id INTEGER);")

        outcomes = await migrate(initialized_db, directory=directory)

        assert [(o.version, o.success) for o in outcomes] == [("900", False)]
        assert "already exists" in outcomes[0].error
        async with aiosqlite.connect(initialized_db) as conn:
            assert await current_version(conn) == "001"


class TestBackup:
    def test_backup_and_restore(self, tmp_path: Path):
        db_path = tmp_path / "data.db"
        db_path.write_bytes(b"original")

        backup_path = backup_database(db_path)
        db_path.write_bytes(b"changed")
        restore_database(db_path, backup_path)

        assert db_path.read_bytes() == b"original"


class TestStatusAndChecks:
    async def test_status_missing_database(self, tmp_path: Path):
        status = await migration_status(tmp_path / "missing.db")

        assert status.exists is False
        assert status.current_version is None
        assert "001" in status.pending

    async def test_status_after_migrate(self, initialized_db: Path):
        status = await migration_status(initialized_db)

        assert status.exists is True
        assert status.applied == ["001"]
        assert status.pending == []

    async def test_checks_pass(self, initialized_db: Path):
        assert all(check.passed for check in await check_schema(initialized_db))

    async def test_missing_table_fails(self, initialized_db: Path):
        async with aiosqlite.connect(initialized_db) as conn:
            await conn.execute("DROP TABLE records")
            await conn.commit()

        checks = {c.name: c for c in await check_schema(initialized_db)}

        assert checks["required_tables"].passed is False
        assert checks["required_tables"].detail == "records"


class TestCli:
    def test_migrate_then_verify(self, temp_db_path: Path, capsys):
        assert main(["--db-path", str(temp_db_path), "migrate", "--no-backup"]) == 0
        assert main(["--db-path", str(temp_db_path), "verify"]) == 0

        output = capsys.readouterr().out
        assert "v001 records" in output
        assert "[PASS] required_tables" in output

    def test_status(self, temp_db_path: Path, capsys):
        assert main(["--db-path", str(temp_db_path), "status"]) == 0
        assert "exists: False" in capsys.readouterr().out
