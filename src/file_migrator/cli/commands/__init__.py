"""Command implementations for the migrator CLI."""

from .admin import handle_drop, handle_force, handle_version
from .create import CREATE_DESCRIPTION, add_create_arguments, handle_create
from .migrate import (
    handle_down,
    handle_goto,
    handle_up,
    num_down_migrations_from_args,
    parse_uint,
)

__all__ = [
    "CREATE_DESCRIPTION",
    "add_create_arguments",
    "handle_create",
    "handle_goto",
    "handle_up",
    "handle_down",
    "num_down_migrations_from_args",
    "parse_uint",
    "handle_drop",
    "handle_force",
    "handle_version",
]
