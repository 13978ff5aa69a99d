"""Core ports (interfaces) for OriginMod config.

The store only talks to persistent storage through this protocol, so the
load/fallback logic can be exercised without touching the device filesystem.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfigStorage(Protocol):
    """Where the config file lives.

    Every method except ``describe`` may raise ``OSError``.
    """

    def ensure_dir(self) -> None:
        """Create the config directory and its parents if missing."""

    def exists(self) -> bool:
        """Return True if the config file is present."""

    def read_text(self) -> str:
        """Read the whole config file."""

    def write_text(self, text: str) -> None:
        """Replace the config file contents and flush them to storage."""

    def describe(self) -> str:
        """Human-readable location, used in log messages."""
