"""Test fakes for file-migrator."""

from .engine import FakeEngine, RecordingLogger

__all__ = ["FakeEngine", "RecordingLogger"]
