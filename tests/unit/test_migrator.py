"""Tests for Migrator."""

from pathlib import Path

import pytest

from file_migrator.core.config import MigratorConfig
from file_migrator.core.exceptions import (
    DuplicateMigrationVersionError,
    IncompatibleSeqAndFormatError,
    InvalidSequenceWidthError,
)
from file_migrator.core.types import EngineVersion, MigrateSQLResult
from file_migrator.logger import LoguruMigrateLogger
from file_migrator.migrator import Migrator
from tests.fakes import FakeEngine, RecordingLogger


def _files(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir())


class TestMigratorInit:
    """Tests for Migrator construction and logger wiring."""

    def test_logger_is_shared_with_engine(self, migrator: Migrator, engine, recorder):
        assert migrator.logger is recorder
        assert engine.log is recorder

    def test_default_logger(self, engine: FakeEngine, migrations_dir: Path):
        migrator = Migrator(engine, migrations_dir, MigrateSQLResult, config=MigratorConfig())

        assert isinstance(migrator.logger, LoguruMigrateLogger)
        assert engine.log is migrator.logger

    def test_set_logger_swaps_both(self, migrator: Migrator, engine: FakeEngine):
        other = RecordingLogger()

        migrator.set_logger(other)

        assert migrator.logger is other
        assert engine.log is other

    def test_config_loaded_from_env(self, engine, migrations_dir: Path, monkeypatch):
        monkeypatch.setenv("MIGRATOR_DIGITS", "4")

        migrator = Migrator(engine, migrations_dir, MigrateSQLResult)

        assert migrator.config.seq_digits == 4


class TestMakeMigrate:
    """Tests for Migrator.make_migrate."""

    def test_sequential_creates_pair(self, migrator: Migrator, migrations_dir: Path):
        pair = migrator.make_migrate("", "", "create_users", "", True, 6)

        assert pair is not None
        assert _files(migrations_dir) == [
            "000001_create_users.down.sql",
            "000001_create_users.up.sql",
        ]
        assert "--users\n" in pair.up.read_text(encoding="utf-8")
        assert "DROP TABLE users;" in pair.down.read_text(encoding="utf-8")

    def test_sequential_continues_numbering(self, migrator: Migrator, migrations_dir: Path):
        migrator.make_migrate("", "", "first", "", True, 4)
        pair = migrator.make_migrate("", "", "second", "", True, 4)

        assert pair.version == "0002"

    def test_custom_extension(self, migrator: Migrator, migrations_dir: Path):
        pair = migrator.make_migrate("", "", "init", "cql", True, 3)

        assert pair.up.name == "001_init.up.cql"
        assert pair.down.name == "001_init.down.cql"

    def test_time_based_unix(self, migrator: Migrator):
        pair = migrator.make_migrate("UTC", "unix", "init", ".sql", False, 6)

        assert pair.version.isdigit()
        assert pair.up.name == f"{pair.version}_init.up.sql"

    def test_empty_result_writes_nothing(
        self, engine, migrations_dir: Path, recorder: RecordingLogger
    ):
        migrator = Migrator(
            engine,
            migrations_dir,
            lambda: MigrateSQLResult(up={"users": []}, down={}),
            config=MigratorConfig(),
            logger=recorder,
        )

        assert migrator.make_migrate("", "", "noop", "", True, 6) is None
        assert _files(migrations_dir) == []
        assert "no change" in recorder.messages("info")

    def test_duplicate_version_fails_before_write(
        self, migrator: Migrator, migrations_dir: Path
    ):
        """A colliding time version must not produce any file."""
        migrator.make_migrate("", "%Y", "first", "", False, 6)
        before = _files(migrations_dir)

        with pytest.raises(DuplicateMigrationVersionError):
            migrator.make_migrate("", "%Y", "second", "", False, 6)

        assert _files(migrations_dir) == before

    def test_seq_and_format_are_exclusive(self, migrator: Migrator, migrations_dir: Path):
        with pytest.raises(IncompatibleSeqAndFormatError):
            migrator.make_migrate("", "unix", "init", "", True, 6)

        assert _files(migrations_dir) == []

    def test_invalid_width(self, migrator: Migrator):
        with pytest.raises(InvalidSequenceWidthError):
            migrator.make_migrate("", "", "init", "", True, 0)

    def test_migrate_func_errors_propagate(self, engine, migrations_dir: Path, recorder):
        def broken() -> MigrateSQLResult:
            raise RuntimeError("cannot diff")

        migrator = Migrator(
            engine, migrations_dir, broken, config=MigratorConfig(), logger=recorder
        )

        with pytest.raises(RuntimeError, match="cannot diff"):
            migrator.make_migrate("", "", "init", "", True, 6)


class TestEngineDelegation:
    """Tests for the pass-through operations."""

    def test_up_all(self, migrator: Migrator, engine: FakeEngine):
        migrator.up(-1)
        migrator.up(0)

        assert engine.calls == [("up", None), ("up", None)]

    def test_up_steps(self, migrator: Migrator, engine: FakeEngine):
        migrator.up(3)

        assert engine.calls == [("steps", 3)]

    def test_down_all(self, migrator: Migrator, engine: FakeEngine):
        migrator.down(-1)

        assert engine.calls == [("down", None)]

    def test_down_steps_are_negative(self, migrator: Migrator, engine: FakeEngine):
        migrator.down(2)

        assert engine.calls == [("steps", -2)]

    def test_goto_force_drop(self, migrator: Migrator, engine: FakeEngine):
        migrator.goto(5)
        migrator.force(-1)
        migrator.drop()

        assert engine.calls == [("migrate", 5), ("force", -1), ("drop", None)]

    def test_version(self, migrator: Migrator, engine: FakeEngine):
        engine.current = EngineVersion(7, dirty=True)

        assert migrator.version() == EngineVersion(7, dirty=True)

    def test_close(self, migrator: Migrator, engine: FakeEngine):
        err = OSError("source")
        engine.close_errors = (err, None)

        assert migrator.close() == (err, None)
        assert engine.closed


def test_build_parser_uses_config(engine: FakeEngine, migrations_dir: Path):
    migrator = Migrator(
        engine, migrations_dir, MigrateSQLResult, config=MigratorConfig(prefetch=3)
    )

    args = migrator.build_parser().parse_args(["up"])

    assert args.prefetch == 3
