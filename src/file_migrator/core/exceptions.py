"""Custom exceptions for file-migrator."""


class MigratorError(Exception):
    """Base exception for all file-migrator errors."""

    pass


class VersionError(MigratorError):
    """Next migration version could not be computed."""

    pass


class InvalidSequenceWidthError(VersionError):
    """Sequence digit width is zero or negative."""

    def __init__(self, message: str = "digits must be positive"):
        super().__init__(message)


class IncompatibleSeqAndFormatError(VersionError):
    """Sequential numbering was combined with a time format."""

    def __init__(
        self, message: str = "the seq and format options are mutually exclusive"
    ):
        super().__init__(message)


class MalformedMigrationFilenameError(VersionError):
    """Existing migration file has no numeric version prefix."""

    def __init__(self, filename: str):
        """Initialize exception with the offending filename.

        Args:
            filename: Path of the file whose prefix could not be parsed.
        """
        self.filename = filename
        super().__init__(f"malformed migration filename: {filename}")


class SequenceOverflowError(VersionError):
    """Next sequence number does not fit in the configured width."""

    def __init__(self, version: str, digits: int):
        self.version = version
        self.digits = digits
        super().__init__(
            f"next sequence number {version} too large. "
            f"At most {digits} digits are allowed"
        )


class UnknownTimezoneError(VersionError):
    """Timezone name could not be loaded."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown time zone {name}")


class DuplicateMigrationVersionError(MigratorError):
    """A migration file with the computed version already exists."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"duplicate migration version: {version}")


class CommandArgumentError(MigratorError):
    """Positional command arguments are missing or invalid."""

    pass


class AbortedError(MigratorError):
    """User declined a confirmation prompt."""

    pass


class EngineError(MigratorError):
    """Base class for sentinels raised by migration engines."""

    pass


class NoChangeError(EngineError):
    """Engine had nothing to apply."""

    def __init__(self, message: str = "no change"):
        super().__init__(message)


class NilVersionError(EngineError):
    """Engine has no migration version recorded."""

    def __init__(self, message: str = "no migration"):
        super().__init__(message)
