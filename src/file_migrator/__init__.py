"""file-migrator: create SQL migration files and drive a migration engine."""

from .core import (
    EngineVersion,
    MigrateSQLResult,
    MigrationFilePair,
    MigratorConfig,
    MigratorError,
    NilVersionError,
    NoChangeError,
)
from .engine import MigrationEngine
from .logger import LoguruMigrateLogger, MigrateLogger
from .migrator import MigrateFunc, Migrator

__version__ = "0.1.0"

__all__ = [
    "Migrator",
    "MigrateFunc",
    "MigrationEngine",
    "MigrateLogger",
    "LoguruMigrateLogger",
    "MigratorConfig",
    "MigrateSQLResult",
    "MigrationFilePair",
    "EngineVersion",
    "MigratorError",
    "NoChangeError",
    "NilVersionError",
]
