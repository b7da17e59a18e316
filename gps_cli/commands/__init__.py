"""CLI commands for gps."""

from .profiles import list_cmd
from .status import current_cmd
from .switch import switch_cmd

__all__ = [
    "current_cmd",
    "list_cmd",
    "switch_cmd",
]
