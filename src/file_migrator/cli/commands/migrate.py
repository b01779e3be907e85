"""Commands that move the database between versions: goto, up, down."""

from __future__ import annotations

import argparse
import re
from typing import TYPE_CHECKING, Sequence

from ...core.exceptions import AbortedError, CommandArgumentError, NoChangeError
from ..session import confirm, timed

if TYPE_CHECKING:
    from ...migrator import Migrator

_UINT = re.compile(r"[0-9]+")


def parse_uint(value: str, message: str) -> int:
    """Parse a non-negative decimal integer.

    Raises:
        CommandArgumentError: With ``message`` if ``value`` is not one.
    """
    if not _UINT.fullmatch(value):
        raise CommandArgumentError(message)
    return int(value)


def num_down_migrations_from_args(
    apply_all: bool, args: Sequence[str]
) -> tuple[int, bool]:
    """Work out how many down migrations to apply.

    Args:
        apply_all: Whether ``--all`` was given.
        args: Positional arguments of the down command.

    Returns:
        Tuple of (count, needs_confirmation). A count of -1 means all.

    Raises:
        CommandArgumentError: On conflicting or unreadable arguments.
    """
    if apply_all:
        if args:
            raise CommandArgumentError("--all cannot be used with other arguments")
        return -1, False

    if len(args) == 0:
        return -1, True
    if len(args) == 1:
        return parse_uint(args[0], "can't read limit argument N"), False
    raise CommandArgumentError("too many arguments")


def handle_goto(migrator: Migrator, args: argparse.Namespace) -> None:
    """Handle goto command."""
    if args.version is None:
        raise CommandArgumentError("please specify version argument V")
    version = parse_uint(args.version, "can't read version argument V")

    with timed(migrator, args):
        try:
            migrator.goto(version)
        except NoChangeError as e:
            migrator.logger.info(str(e))


def handle_up(migrator: Migrator, args: argparse.Namespace) -> None:
    """Handle up command."""
    limit = -1
    if args.limit is not None:
        limit = parse_uint(args.limit, "can't read limit argument N")

    with timed(migrator, args):
        try:
            migrator.up(limit)
        except NoChangeError as e:
            migrator.logger.info(str(e))


def handle_down(migrator: Migrator, args: argparse.Namespace) -> None:
    """Handle down command.

    Without a count or ``--all`` the user must confirm rolling back
    everything.

    Raises:
        AbortedError: If the user declines.
    """
    num, needs_confirm = num_down_migrations_from_args(args.all, args.limit)

    if needs_confirm:
        if not confirm("Are you sure you want to apply all down migrations? [y/N]"):
            raise AbortedError("Not applying all down migrations")
        migrator.logger.info("Applying all down migrations")

    with timed(migrator, args):
        try:
            migrator.down(num)
        except NoChangeError as e:
            migrator.logger.info(str(e))
