"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from file_migrator.core.config import MigratorConfig
from file_migrator.core.types import MigrateSQLResult
from file_migrator.migrator import Migrator
from tests.fakes import FakeEngine, RecordingLogger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MIGRATOR_* variables from the host out of tests."""
    for name in (
        "MIGRATOR_CONFIG",
        "MIGRATOR_VERBOSE",
        "MIGRATOR_PREFETCH",
        "MIGRATOR_LOCK_TIMEOUT",
        "MIGRATOR_EXT",
        "MIGRATOR_SEQ",
        "MIGRATOR_DIGITS",
        "MIGRATOR_FORMAT",
        "MIGRATOR_TZ",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def migrations_dir(tmp_path: Path) -> Path:
    """Provide an empty migrations directory."""
    path = tmp_path / "migrations"
    path.mkdir()
    return path


@pytest.fixture
def sample_result() -> MigrateSQLResult:
    """A two-table schema diff."""
    return MigrateSQLResult(
        up={
            "users": [
                "CREATE TABLE users (id INTEGER PRIMARY KEY)",
                "CREATE INDEX idx_users_id ON users (id)",
            ],
            "posts": ["ALTER TABLE posts ADD COLUMN user_id INTEGER"],
        },
        down={
            "posts": ["ALTER TABLE posts DROP COLUMN user_id"],
            "users": ["DROP TABLE users"],
        },
    )


@pytest.fixture
def engine() -> FakeEngine:
    """Provide a fresh fake engine."""
    return FakeEngine()


@pytest.fixture
def recorder() -> RecordingLogger:
    """Provide a recording logger."""
    return RecordingLogger()


@pytest.fixture
def migrator(
    engine: FakeEngine,
    migrations_dir: Path,
    sample_result: MigrateSQLResult,
    recorder: RecordingLogger,
) -> Migrator:
    """Provide a migrator wired to the fake engine and recording logger."""
    return Migrator(
        engine,
        migrations_dir,
        lambda: sample_result,
        config=MigratorConfig(),
        logger=recorder,
    )
