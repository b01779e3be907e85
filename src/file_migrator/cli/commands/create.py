"""Create command for the migrator CLI."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from ...core.config import MigratorConfig
from ...core.exceptions import CommandArgumentError

if TYPE_CHECKING:
    from ...migrator import Migrator

CREATE_DESCRIPTION = """\
Create a set of timestamped up/down migrations titled NAME, with extension E.
Use --seq to generate sequential up/down migrations with N digits.
Use --format to specify a strftime pattern. Migrations with the same time
cause a "duplicate migration version" error.
Use --tz to specify the timezone used for non-sequential migrations
(default: local)."""


def add_create_arguments(parser: argparse.ArgumentParser, config: MigratorConfig) -> None:
    """Add create arguments, defaulting to the configured values."""
    parser.add_argument("name", nargs="?", help="Migration title")
    parser.add_argument("--ext", default=config.ext, help="File extension (default: .sql)")
    parser.add_argument(
        "--seq",
        action="store_true",
        default=config.seq,
        help="Use sequential numbers instead of timestamps",
    )
    parser.add_argument(
        "--digits",
        type=int,
        default=config.seq_digits,
        help=f"The number of digits to use in sequences (default: {config.seq_digits})",
    )
    parser.add_argument(
        "--format",
        default=config.time_format,
        help=(
            'The strftime pattern to use. If "unix" or "unixNano" is given, the '
            "seconds or nanoseconds since January 1, 1970 UTC are used. "
            "Invalid patterns are not rejected"
        ),
    )
    parser.add_argument(
        "--tz",
        default=config.timezone,
        help="The timezone used to format the time (default: local)",
    )


def handle_create(migrator: Migrator, args: argparse.Namespace) -> None:
    """Handle create command.

    Args:
        migrator: Migrator to create the files with.
        args: Parsed command arguments.

    Raises:
        CommandArgumentError: If no name was given.
        VersionError: If the version cannot be computed.
        DuplicateMigrationVersionError: If the version is already taken.
    """
    if not args.name:
        raise CommandArgumentError("please specify name")

    migrator.make_migrate(
        args.tz,
        args.format,
        args.name,
        args.ext,
        args.seq,
        args.digits,
    )
