"""Error rendering for gps commands."""

import sys

from rich.console import Console

from ..errors import GitCommandError
from ..errors import GpsError
from ..errors import InvalidUsageError
from ..errors import MissingArgumentError
from ..errors import NotARepositoryError
from ..errors import ProfileNotFoundError
from ..errors import SettingsError
from ..errors import UnknownCommandError
from ..utils.error_format import escape_markup


def display_gps_error(console: Console, error: Exception, verbose: bool = False) -> bool:
    """Print a GpsError as ``Error: <message>`` plus a follow-up hint.

    Returns:
        True if the error was a GpsError, False if not (caller should handle).
    """
    if not isinstance(error, GpsError):
        return False

    console.print(f"[red]Error: {escape_markup(str(error))}[/red]")

    hint = _get_hint(error)
    if hint:
        console.print(hint, markup=False)

    if verbose and sys.exc_info()[0] is not None:
        console.print("[dim]─── Traceback ───[/dim]")
        console.print_exception()

    return True


def _get_hint(error: GpsError) -> str | None:
    if isinstance(error, MissingArgumentError):
        return f"Usage: {error.usage}" if error.usage else None

    if isinstance(error, (UnknownCommandError, InvalidUsageError)):
        return "Use 'gps help' for usage information"

    if isinstance(error, NotARepositoryError):
        return f"Run the command inside a git working tree (current directory: {error.path})"

    if isinstance(error, ProfileNotFoundError):
        return "Available profiles:"

    if isinstance(error, GitCommandError):
        return "Changes made before this command failed were kept."

    if isinstance(error, SettingsError):
        return "Fix or remove the settings file and try again."

    return None
