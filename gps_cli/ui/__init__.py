"""Console rendering helpers for the CLI."""

from .error_display import display_gps_error
from .tables import render_profile_table

__all__ = ["display_gps_error", "render_profile_table"]
