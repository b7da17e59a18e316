"""Markup-safe formatting for values printed through the rich console."""

from __future__ import annotations

from rich.markup import escape as _escape_markup


def escape_markup(value: object) -> str:
    """Escape a value so its brackets are not read as Rich markup tags."""
    return _escape_markup(str(value))
