"""Protocol for the external migration engine.

The engine owns everything stateful: applying and rolling back migrations,
the dirty flag, version locking and the database driver. The migrator only
forwards commands to it.

Engines signal "nothing to do" with ``NoChangeError`` and "no version
recorded" with ``NilVersionError`` from ``file_migrator.core.exceptions``.
Any other exception is treated as a failure.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .core.types import EngineVersion
    from .logger import MigrateLogger


@runtime_checkable
class MigrationEngine(Protocol):
    """Operations the command surface needs from a migration engine."""

    # Migrations loaded ahead of the one being executed
    prefetch_migrations: int
    # Seconds allowed for acquiring the database lock
    lock_timeout: float
    # Set to stop after the currently running migration
    graceful_stop: threading.Event
    log: MigrateLogger | None

    def up(self) -> None:
        """Apply all pending up migrations."""
        ...

    def down(self) -> None:
        """Apply all down migrations."""
        ...

    def steps(self, n: int) -> None:
        """Apply ``n`` migrations, up if positive and down if negative."""
        ...

    def migrate(self, version: int) -> None:
        """Migrate up or down to ``version``."""
        ...

    def force(self, version: int) -> None:
        """Record ``version`` without running migrations, clearing dirty state."""
        ...

    def drop(self) -> None:
        """Drop everything inside the database."""
        ...

    def version(self) -> EngineVersion:
        """Return the current version and dirty flag."""
        ...

    def close(self) -> tuple[Exception | None, Exception | None]:
        """Release the source and database, returning their close errors."""
        ...
