"""Core types, configuration and errors for file-migrator."""

from .config import MigratorConfig
from .exceptions import (
    AbortedError,
    CommandArgumentError,
    DuplicateMigrationVersionError,
    EngineError,
    IncompatibleSeqAndFormatError,
    InvalidSequenceWidthError,
    MalformedMigrationFilenameError,
    MigratorError,
    NilVersionError,
    NoChangeError,
    SequenceOverflowError,
    UnknownTimezoneError,
    VersionError,
)
from .types import EngineVersion, MigrateSQLResult, MigrationFilePair, StatementsByTable

__all__ = [
    "MigratorConfig",
    "MigratorError",
    "VersionError",
    "InvalidSequenceWidthError",
    "IncompatibleSeqAndFormatError",
    "MalformedMigrationFilenameError",
    "SequenceOverflowError",
    "UnknownTimezoneError",
    "DuplicateMigrationVersionError",
    "CommandArgumentError",
    "AbortedError",
    "EngineError",
    "NoChangeError",
    "NilVersionError",
    "MigrateSQLResult",
    "MigrationFilePair",
    "EngineVersion",
    "StatementsByTable",
]
