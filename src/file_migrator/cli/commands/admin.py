"""Commands that act on engine state directly: drop, force, version."""

from __future__ import annotations

import argparse
import re
from typing import TYPE_CHECKING

from ...core.exceptions import AbortedError, CommandArgumentError
from ..session import confirm, timed

if TYPE_CHECKING:
    from ...migrator import Migrator

_INT = re.compile(r"-?[0-9]+")


def handle_drop(migrator: Migrator, args: argparse.Namespace) -> None:
    """Handle drop command, confirming first unless ``-f`` was given."""
    if not args.force:
        if not confirm("Are you sure you want to drop the entire database schema? [y/N]"):
            raise AbortedError("Aborted dropping the entire database schema")
        migrator.logger.info("Dropping the entire database schema")

    with timed(migrator, args):
        migrator.drop()


def handle_force(migrator: Migrator, args: argparse.Namespace) -> None:
    """Handle force command. A version of -1 clears the recorded version."""
    if args.version is None:
        raise CommandArgumentError("please specify version argument V")
    if not _INT.fullmatch(args.version):
        raise CommandArgumentError("can't read version argument V")

    version = int(args.version)
    if version < -1:
        raise CommandArgumentError("argument V must be >= -1")

    with timed(migrator, args):
        migrator.force(version)


def handle_version(migrator: Migrator, args: argparse.Namespace) -> None:
    """Handle version command."""
    version = migrator.version()
    migrator.logger.printf("%s", version)
