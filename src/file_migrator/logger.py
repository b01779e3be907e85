"""Logging for the migrator and the engine it drives.

The migrator logs through a ``MigrateLogger``; the same object is handed to
the engine so that engine output lands in the same place. The default
implementation writes to loguru, bound with ``name="migrator"``.
"""

from __future__ import annotations

from typing import Any, NoReturn, Protocol, runtime_checkable

from loguru import logger as _loguru_logger


@runtime_checkable
class MigrateLogger(Protocol):
    """Logger capability shared by the migrator and its engine."""

    def printf(self, fmt: str, *args: Any) -> None: ...

    def verbose(self) -> bool: ...

    def set_verbose(self, verbose: bool) -> None: ...

    def info(self, msg: str, **fields: Any) -> None: ...

    def error(self, msg: str, **fields: Any) -> None: ...

    def fatal(self, msg: str, **fields: Any) -> NoReturn: ...


def _render(msg: str, fields: dict[str, Any]) -> str:
    if not fields:
        return msg
    pairs = " ".join(f"{key}={value!r}" for key, value in fields.items())
    return f"{msg} {pairs}"


class LoguruMigrateLogger:
    """``MigrateLogger`` backed by loguru.

    Key/value fields are bound as loguru extras and appended to the message.
    The message itself is never passed through ``str.format``, so SQL with
    braces is logged verbatim.
    """

    def __init__(self, name: str = "migrator", verbose: bool = False):
        self._logger = _loguru_logger.bind(name=name)
        self._verbose = verbose

    def printf(self, fmt: str, *args: Any) -> None:
        self._logger.info(fmt % args if args else fmt)

    def verbose(self) -> bool:
        return self._verbose

    def set_verbose(self, verbose: bool) -> None:
        self._verbose = verbose

    def info(self, msg: str, **fields: Any) -> None:
        self._logger.bind(**fields).info(_render(msg, fields))

    def error(self, msg: str, **fields: Any) -> None:
        self._logger.bind(**fields).error(_render(msg, fields))

    def fatal(self, msg: str, **fields: Any) -> NoReturn:
        """Log at CRITICAL and exit with status 1."""
        self._logger.bind(**fields).critical(_render(msg, fields))
        raise SystemExit(1)


def default_logger() -> LoguruMigrateLogger:
    """Create the logger a new migrator starts with."""
    return LoguruMigrateLogger()
