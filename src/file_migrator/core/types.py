"""Type definitions for file-migrator."""

from dataclasses import dataclass, field
from pathlib import Path

# Table name -> ordered SQL statements
StatementsByTable = dict[str, list[str]]


@dataclass
class MigrateSQLResult:
    """Schema diff produced by a migrate function.

    Attributes:
        up: Statements that move the schema forward, grouped by table.
        down: Statements that revert it, grouped by table.
    """

    up: StatementsByTable = field(default_factory=dict)
    down: StatementsByTable = field(default_factory=dict)

    def empty(self) -> bool:
        """Check whether the result carries no statements at all."""
        return not any(self.up.values()) and not any(self.down.values())


@dataclass(frozen=True)
class MigrationFilePair:
    """Up/down file paths for a single migration version."""

    version: str
    name: str
    ext: str
    up: Path
    down: Path


@dataclass(frozen=True)
class EngineVersion:
    """Current version reported by a migration engine."""

    version: int
    dirty: bool = False

    def __str__(self) -> str:
        """Render as the version command prints it."""
        if self.dirty:
            return f"{self.version} (dirty)"
        return str(self.version)
