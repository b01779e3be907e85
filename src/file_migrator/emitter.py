"""Serialization of migration results into up/down SQL files."""

from __future__ import annotations

import glob
from pathlib import Path

from .core.exceptions import DuplicateMigrationVersionError
from .core.types import MigrateSQLResult, MigrationFilePair, StatementsByTable


def render_sql(statements_by_table: StatementsByTable) -> str:
    """Render statements grouped under a ``--<table>`` comment per table."""
    lines: list[str] = []
    for table_name, statements in statements_by_table.items():
        lines.append(f"--{table_name}")
        lines.extend(f"{sql};" for sql in statements)
    return "".join(f"{line}\n" for line in lines)


def migration_file_pair(
    migrations_path: Path | str, version: str, name: str, ext: str
) -> MigrationFilePair:
    """Build the up/down paths for a new migration.

    Args:
        migrations_path: Directory holding migration files.
        version: Version computed for the new migration.
        name: Migration title.
        ext: Extension including the leading dot.

    Returns:
        Paths for the new file pair.

    Raises:
        DuplicateMigrationVersionError: If any file already uses ``version``.
    """
    directory = Path(migrations_path)
    existing = list(directory.glob(f"{glob.escape(version)}_*{ext}"))
    if existing:
        raise DuplicateMigrationVersionError(version)

    return MigrationFilePair(
        version=version,
        name=name,
        ext=ext,
        up=directory / f"{version}_{name}.up{ext}",
        down=directory / f"{version}_{name}.down{ext}",
    )


def write_migration(pair: MigrationFilePair, result: MigrateSQLResult) -> None:
    """Write both sides of ``result`` to the paths in ``pair``.

    If the down file cannot be written the up file is removed again, so a
    failed write leaves no half migration behind.
    """
    pair.up.write_text(render_sql(result.up), encoding="utf-8")
    try:
        pair.down.write_text(render_sql(result.down), encoding="utf-8")
    except OSError:
        pair.up.unlink(missing_ok=True)
        raise
