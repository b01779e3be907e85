"""Command-line interface for file-migrator."""

from .main import create_parser, main, run

__all__ = ["create_parser", "main", "run"]
