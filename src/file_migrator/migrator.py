"""Migrator: file generation plus pass-through to a migration engine.

Example:
    from file_migrator import Migrator, MigrateSQLResult

    def diff() -> MigrateSQLResult:
        return MigrateSQLResult(
            up={"users": ["ALTER TABLE users ADD COLUMN email TEXT"]},
            down={"users": ["ALTER TABLE users DROP COLUMN email"]},
        )

    migrator = Migrator(engine, "migrations", diff)
    sys.exit(migrator.run())
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Sequence

from .core.config import MigratorConfig
from .core.types import EngineVersion, MigrateSQLResult, MigrationFilePair
from .emitter import migration_file_pair, write_migration
from .engine import MigrationEngine
from .logger import MigrateLogger, default_logger
from .versioning import (
    check_seq_and_format,
    next_seq_version,
    normalize_ext,
    time_version,
)

MigrateFunc = Callable[[], MigrateSQLResult]


class Migrator:
    """Creates migration files and drives a migration engine.

    Args:
        engine: External engine that applies migrations from ``migrations_path``.
        migrations_path: Directory holding ``<version>_<name>.up|down.<ext>`` files.
        migrate_func: Callable producing the schema diff for ``create``.
        config: CLI defaults, loaded from the environment when omitted.
        logger: Logger for the migrator and engine.
    """

    def __init__(
        self,
        engine: MigrationEngine,
        migrations_path: Path | str,
        migrate_func: MigrateFunc,
        config: MigratorConfig | None = None,
        logger: MigrateLogger | None = None,
    ):
        self.engine = engine
        self.migrations_path = Path(migrations_path)
        self.migrate_func = migrate_func
        self.config = config or MigratorConfig.from_env_or_file()
        self.set_logger(logger or default_logger())

    def set_logger(self, logger: MigrateLogger) -> None:
        """Use ``logger`` for both the migrator and the engine."""
        self.engine.log = logger
        self.logger = logger

    def next_version(
        self, timezone_name: str, fmt: str, ext: str, seq: bool, seq_digits: int
    ) -> str:
        """Compute the version a new migration would get.

        Args:
            timezone_name: Zone for time based versions, empty for local.
            fmt: Time format, ``unix`` or ``unixNano``; empty for the default.
            ext: Normalized file extension.
            seq: Use sequential numbering.
            seq_digits: Width of sequential versions.
        """
        check_seq_and_format(seq, fmt)
        if seq:
            return next_seq_version(self.migrations_path, ext, seq_digits)
        return time_version(timezone_name, fmt)

    def migration_paths(
        self,
        timezone_name: str,
        fmt: str,
        name: str,
        ext: str,
        seq: bool,
        seq_digits: int,
    ) -> MigrationFilePair:
        """Resolve the up/down paths for a new migration.

        Raises:
            VersionError: If the version cannot be computed.
            DuplicateMigrationVersionError: If the version is already taken.
        """
        ext = normalize_ext(ext)
        version = self.next_version(timezone_name, fmt, ext, seq, seq_digits)
        return migration_file_pair(self.migrations_path, version, name, ext)

    def make_migrate(
        self,
        timezone_name: str,
        fmt: str,
        name: str,
        ext: str,
        seq: bool,
        seq_digits: int,
    ) -> MigrationFilePair | None:
        """Write a new up/down migration pair from the migrate function's diff.

        Returns:
            The written file pair, or None when the diff is empty.
        """
        result = self.migrate_func()

        if result.empty():
            self.logger.printf("no change")
            return None

        pair = self.migration_paths(timezone_name, fmt, name, ext, seq, seq_digits)
        write_migration(pair, result)
        self.logger.info("created migration", up=str(pair.up), down=str(pair.down))
        return pair

    def up(self, n: int) -> None:
        """Apply ``n`` up migrations, or all of them when ``n <= 0``."""
        if n <= 0:
            self.engine.up()
        else:
            self.engine.steps(n)

    def down(self, n: int) -> None:
        """Apply ``n`` down migrations, or all of them when ``n <= 0``."""
        if n <= 0:
            self.engine.down()
        else:
            self.engine.steps(-n)

    def drop(self) -> None:
        self.engine.drop()

    def force(self, version: int) -> None:
        self.engine.force(version)

    def goto(self, version: int) -> None:
        self.engine.migrate(version)

    def version(self) -> EngineVersion:
        return self.engine.version()

    def close(self) -> tuple[Exception | None, Exception | None]:
        """Close the engine, returning (source error, database error)."""
        return self.engine.close()

    def build_parser(self) -> argparse.ArgumentParser:
        """Build the command-line parser for this migrator."""
        from .cli.main import create_parser

        return create_parser(self.config)

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse ``argv`` and run the selected command.

        Returns:
            Process exit status.
        """
        from .cli.main import run

        return run(self, argv)
