"""Profile listing command."""

from __future__ import annotations

import click

from ..console import console
from ..context import GpsContext
from ..profiles import ProfileResolver
from ..ui import render_profile_table


def print_profiles(context: GpsContext) -> None:
    """Print the detected profiles, or setup guidance when there are none."""
    profiles = ProfileResolver(context).resolve()

    if not profiles:
        console.print("[yellow]No profiles auto-detected.[/yellow]")
        console.print("Make sure you have SSH hosts in ~/.ssh/config and git configs set up.")
        return

    console.print(render_profile_table(profiles))


# Extra arguments are ignored
@click.command(name="list", context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
@click.pass_obj
def list_cmd(context: GpsContext):
    """Show auto-detected profiles."""
    console.print("[bold cyan]Auto-detected Git Profiles:[/bold cyan]")
    console.print()
    print_profiles(context)


__all__ = ["list_cmd", "print_profiles"]
