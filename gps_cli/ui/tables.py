"""Table rendering for detected profiles."""

from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from ..profiles import Profile


def render_profile_table(profiles: Sequence[Profile], title: str | None = None) -> Table:
    """Build the PROFILE / NAME / EMAIL / SSH HOST / SOURCE table."""
    table = Table(title=title, show_header=True, header_style="bold cyan", title_justify="left")
    table.add_column("PROFILE", style="green", overflow="fold")
    table.add_column("NAME", overflow="fold")
    table.add_column("EMAIL", overflow="fold")
    table.add_column("SSH HOST", style="cyan", overflow="fold")
    table.add_column("SOURCE", style="dim", overflow="fold")

    for profile in profiles:
        # Text cells so names and emails are never read as markup
        table.add_row(
            Text(profile.name),
            Text(profile.display_name_or_unknown()),
            Text(profile.email_or_unknown()),
            Text(profile.ssh_host),
            Text(profile.description),
        )

    return table
