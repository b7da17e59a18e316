"""Error types raised by gps operations.

Core modules raise these; the CLI layer renders them and exits with status 1.
Missing optional data (absent config files, unset keys) is never an error.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class GpsError(Exception):
    """Base class for user-facing gps errors."""

    exit_code = 1


class MissingArgumentError(GpsError):
    """Raised when a required command argument was not given."""

    def __init__(self, argument: str, usage: str | None = None):
        self.argument = argument
        self.usage = usage
        super().__init__(f"{argument} is required")


class ProfileNotFoundError(GpsError):
    """Raised when a profile name is not in the resolved profile set."""

    def __init__(self, name: str, available: Sequence[str] = ()):
        self.name = name
        self.available = list(available)
        super().__init__(f"Profile '{name}' not found")


class NotARepositoryError(GpsError):
    """Raised when local scope is requested outside a git working tree."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__("Not in a git repository. Cannot set local configuration.")


class UnknownCommandError(GpsError):
    """Raised for a command name the CLI does not know."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unknown command '{command}'")


class InvalidUsageError(GpsError):
    """Raised when the command line cannot be parsed."""


class GitCommandError(GpsError):
    """Raised when a mutating git command exits non-zero."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ""):
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = f": {self.stderr}" if self.stderr else ""
        super().__init__(f"'{' '.join(self.args_list)}' failed with exit code {returncode}{detail}")


class SettingsError(GpsError):
    """Raised when the settings file cannot be parsed or validated."""
