"""Per-invocation setup and teardown shared by all commands."""

from __future__ import annotations

import signal
import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Callable, Iterator

if TYPE_CHECKING:
    import argparse

    from ..migrator import Migrator

InputFunc = Callable[[str], str]


def setup_migrator(migrator: Migrator, args: argparse.Namespace) -> None:
    """Apply global options to the logger and engine."""
    if args.verbose:
        migrator.logger.set_verbose(True)

    migrator.engine.prefetch_migrations = args.prefetch
    migrator.engine.lock_timeout = float(args.lock_timeout)


def close_migrator(migrator: Migrator) -> None:
    """Close the engine, logging rather than raising any close errors."""
    source_err, database_err = migrator.close()
    if source_err is not None or database_err is not None:
        migrator.logger.error(
            "encountered an error when close migrator",
            source_err=source_err,
            database_err=database_err,
        )


def install_interrupt_handler(migrator: Migrator):
    """Request a graceful engine stop on the first SIGINT.

    The first Ctrl+C lets the running migration finish. The previous handler
    is reinstated at once, so a second Ctrl+C behaves as usual.

    Returns:
        The handler that was replaced, or None outside the main thread.
    """
    if threading.current_thread() is not threading.main_thread():
        return None

    previous = signal.getsignal(signal.SIGINT)
    if previous is None:
        # Installed outside Python
        previous = signal.SIG_DFL

    def handle(signum, frame) -> None:
        signal.signal(signal.SIGINT, previous)
        migrator.logger.info("Stopping after this running migration ...")
        migrator.engine.graceful_stop.set()

    signal.signal(signal.SIGINT, handle)
    return previous


@contextmanager
def migrator_session(migrator: Migrator, args: argparse.Namespace) -> Iterator[None]:
    """Set up the migrator for one command and always close it afterwards."""
    previous = None
    try:
        setup_migrator(migrator, args)
        previous = install_interrupt_handler(migrator)
        yield
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)
        close_migrator(migrator)


@contextmanager
def timed(migrator: Migrator, args: argparse.Namespace) -> Iterator[None]:
    """Log the elapsed time of the block when running verbosely."""
    start = time.perf_counter()
    yield
    if args.verbose:
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        migrator.logger.info(f"Finished after {elapsed_ms} ms")


def confirm(question: str, input_func: InputFunc | None = None) -> bool:
    """Ask a yes/no question; only ``y`` (any case) counts as yes."""
    print(question)
    try:
        response = (input_func or input)("")
    except EOFError:
        return False
    return response.strip().lower() == "y"
