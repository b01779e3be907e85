"""CLI entry point for a migrator."""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING, Callable, NoReturn, Sequence

from ..core.config import MigratorConfig
from . import commands
from .session import migrator_session

if TYPE_CHECKING:
    from ..migrator import Migrator

Handler = Callable[["Migrator", argparse.Namespace], None]

HANDLERS: dict[str, Handler] = {
    "create": commands.handle_create,
    "goto": commands.handle_goto,
    "up": commands.handle_up,
    "down": commands.handle_down,
    "drop": commands.handle_drop,
    "force": commands.handle_force,
    "version": commands.handle_version,
}


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}")
    return n


def _add_global_arguments(
    parser: argparse.ArgumentParser, config: MigratorConfig, suppress: bool
) -> None:
    """Add options accepted before or after the subcommand.

    Subcommand copies use SUPPRESS so they only override the top-level
    value when given explicitly.
    """

    def default(value):
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "--verbose",
        action="store_true",
        default=default(config.verbose),
        help="Print verbose logging",
    )
    parser.add_argument(
        "--prefetch",
        type=_non_negative_int,
        default=default(config.prefetch),
        metavar="N",
        help=f"Number of migrations to load in advance before executing (default: {config.prefetch})",
    )
    parser.add_argument(
        "--lock-timeout",
        type=_non_negative_int,
        default=default(config.lock_timeout),
        metavar="N",
        help=f"Allow N seconds to acquire database lock (default: {config.lock_timeout})",
    )


def create_parser(config: MigratorConfig | None = None) -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    config = config or MigratorConfig()

    parser = argparse.ArgumentParser(
        prog="migrate",
        description="a CLI command for migrate databases",
    )
    _add_global_arguments(parser, config, suppress=False)

    common = argparse.ArgumentParser(add_help=False)
    _add_global_arguments(common, config, suppress=True)

    subparsers = parser.add_subparsers(dest="command", required=False)

    create_cmd = subparsers.add_parser(
        "create",
        parents=[common],
        help="Create a set of up/down migrations titled NAME",
        description=commands.CREATE_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    commands.add_create_arguments(create_cmd, config)

    goto_parser = subparsers.add_parser(
        "goto", parents=[common], help="Migrate to version V"
    )
    goto_parser.add_argument("version", nargs="?", metavar="V", help="Target version")

    up_parser = subparsers.add_parser(
        "up", parents=[common], help="Apply all or N up migrations"
    )
    up_parser.add_argument("limit", nargs="?", metavar="N", help="Number of migrations")

    down_parser = subparsers.add_parser(
        "down", parents=[common], help="Apply all or N down migrations"
    )
    down_parser.add_argument("limit", nargs="*", metavar="N", help="Number of migrations")
    down_parser.add_argument(
        "--all", action="store_true", help="Apply all down migrations"
    )

    drop_parser = subparsers.add_parser(
        "drop", parents=[common], help="Drop everything inside database"
    )
    drop_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Force the drop command by bypassing the confirmation prompt",
    )

    force_parser = subparsers.add_parser(
        "force",
        parents=[common],
        help="Set version V but don't run migration (ignores dirty state)",
    )
    force_parser.add_argument("version", nargs="?", metavar="V", help="Version to record")

    subparsers.add_parser(
        "version", parents=[common], help="Print current migration version"
    )

    return parser


def run(migrator: Migrator, argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the selected command against ``migrator``.

    Failures are reported through ``migrator.logger.fatal``, which exits.

    Returns:
        0 once the command has completed, 1 if it failed and the logger
        did not exit.
    """
    parser = create_parser(migrator.config)
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    handler = HANDLERS[args.command]
    try:
        with migrator_session(migrator, args):
            handler(migrator, args)
    except Exception as e:
        migrator.logger.fatal(str(e))
        return 1

    return 0


def main(migrator: Migrator, argv: Sequence[str] | None = None) -> NoReturn:
    """Run the CLI and exit with its status."""
    sys.exit(run(migrator, argv))
