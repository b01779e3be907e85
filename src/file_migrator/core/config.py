"""Configuration management for file-migrator."""

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class MigratorConfig:
    """Defaults for the migrator command surface.

    Every field maps to a CLI flag; explicit flags override these values.
    """

    verbose: bool = False
    prefetch: int = 10
    lock_timeout: int = 15  # seconds
    ext: str = ""
    seq: bool = False
    seq_digits: int = 6
    time_format: str = ""
    timezone: str = ""  # empty means local time

    @classmethod
    def from_env(cls) -> "MigratorConfig":
        """Load configuration from environment variables."""
        config = cls()
        config.apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "MigratorConfig":
        """Load configuration from a TOML file, then apply env overrides.

        Values may live at the top level or under a ``[migrator]`` table.

        Args:
            path: Path to the TOML file.

        Returns:
            Loaded configuration.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        section: dict[str, Any] = data.get("migrator", data)
        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in section.items() if k in known})
        config.apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "MigratorConfig":
        """Load from an explicit file, ``MIGRATOR_CONFIG``, or the environment."""
        path = path or os.environ.get("MIGRATOR_CONFIG")
        if path:
            return cls.from_file(path)
        return cls.from_env()

    def apply_env(self) -> None:
        """Override fields from ``MIGRATOR_*`` environment variables."""
        if verbose := os.environ.get("MIGRATOR_VERBOSE"):
            self.verbose = _env_bool(verbose)
        if prefetch := os.environ.get("MIGRATOR_PREFETCH"):
            self.prefetch = int(prefetch)
        if lock_timeout := os.environ.get("MIGRATOR_LOCK_TIMEOUT"):
            self.lock_timeout = int(lock_timeout)

        if ext := os.environ.get("MIGRATOR_EXT"):
            self.ext = ext
        if seq := os.environ.get("MIGRATOR_SEQ"):
            self.seq = _env_bool(seq)
        if digits := os.environ.get("MIGRATOR_DIGITS"):
            self.seq_digits = int(digits)
        if time_format := os.environ.get("MIGRATOR_FORMAT"):
            self.time_format = time_format
        if tz := os.environ.get("MIGRATOR_TZ"):
            self.timezone = tz
