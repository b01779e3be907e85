"""Version naming for new migration files.

Two schemes are supported and they are mutually exclusive:

- Sequential: a zero-padded counter one past the newest existing file,
  e.g. ``000042``.
- Time based: "now" formatted in a timezone, either with a ``strftime``
  pattern (default ``%Y%m%d%H%M%S``) or as ``unix`` / ``unixNano`` epoch
  integers.

Example:
    from file_migrator.versioning import next_seq_version, time_version

    next_seq_version(Path("migrations"), ".sql", 6)   # "000003"
    time_version("UTC", "unix")                       # "1760851200"
"""

from __future__ import annotations

import re
import time
from datetime import datetime, timedelta, timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .core.exceptions import (
    IncompatibleSeqAndFormatError,
    InvalidSequenceWidthError,
    MalformedMigrationFilenameError,
    SequenceOverflowError,
    UnknownTimezoneError,
)

DEFAULT_TIME_FORMAT = "%Y%m%d%H%M%S"
DEFAULT_EXT = ".sql"

UNIX_FORMAT = "unix"
UNIX_NANO_FORMAT = "unixNano"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_DIGITS = re.compile(r"[0-9]+")


def normalize_ext(ext: str) -> str:
    """Return the extension with exactly one leading dot, ``.sql`` if empty."""
    if not ext:
        return DEFAULT_EXT
    return "." + ext.lstrip(".")


def check_seq_and_format(seq: bool, fmt: str) -> None:
    """Reject sequential numbering combined with a time format.

    Raises:
        IncompatibleSeqAndFormatError: If both were requested.
    """
    if seq and fmt:
        raise IncompatibleSeqAndFormatError()


def next_seq_version(migrations_path: Path | str, ext: str, seq_digits: int) -> str:
    """Compute the next sequential version.

    The newest file is the lexicographically last ``*<ext>`` file in the
    directory; its prefix up to the first ``_`` is the previous version.

    Args:
        migrations_path: Directory holding migration files.
        ext: Extension including the leading dot.
        seq_digits: Zero-padded width of the version.

    Returns:
        Next version, zero-padded to ``seq_digits``.

    Raises:
        InvalidSequenceWidthError: If ``seq_digits`` is not positive.
        MalformedMigrationFilenameError: If the newest file has no numeric prefix.
        SequenceOverflowError: If the next number needs more than ``seq_digits``.
    """
    matches = sorted(str(p) for p in Path(migrations_path).glob(f"*{ext}"))

    if seq_digits <= 0:
        raise InvalidSequenceWidthError()

    next_seq = 1

    if matches:
        filename = matches[-1]
        prefix, sep, _ = Path(filename).name.partition("_")

        # At least one digit before the separator
        if not sep or not _DIGITS.fullmatch(prefix):
            raise MalformedMigrationFilenameError(filename)

        next_seq = int(prefix) + 1

    version = str(next_seq).zfill(seq_digits)

    if len(version) > seq_digits:
        raise SequenceOverflowError(version, seq_digits)

    return version


def load_timezone(name: str) -> tzinfo | None:
    """Load a timezone by IANA name.

    Args:
        name: Zone name. Empty or ``Local`` selects the local zone (None).

    Raises:
        UnknownTimezoneError: If the zone cannot be found.
    """
    if not name or name == "Local":
        return None
    if name == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise UnknownTimezoneError(name) from e


def time_version(
    timezone_name: str, fmt: str, now: datetime | None = None
) -> str:
    """Compute a time based version.

    Args:
        timezone_name: IANA zone name, empty for local time.
        fmt: ``""`` for the default pattern, ``unix``, ``unixNano``, or any
            ``strftime`` pattern. Patterns are not validated.
        now: Current time override, must be timezone aware.

    Returns:
        The formatted version string.
    """
    location = load_timezone(timezone_name)

    if fmt == UNIX_NANO_FORMAT and now is None:
        return str(time.time_ns())

    if now is None:
        now = datetime.now(timezone.utc)
    now = now.astimezone(location)

    if fmt == "":
        return now.strftime(DEFAULT_TIME_FORMAT)
    if fmt == UNIX_FORMAT:
        return str(int(now.timestamp()))
    if fmt == UNIX_NANO_FORMAT:
        return str((now - _EPOCH) // timedelta(microseconds=1) * 1000)
    return now.strftime(fmt)
