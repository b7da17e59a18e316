"""Profile switch command."""

from __future__ import annotations

import sys

import click

from ..console import console
from ..context import GpsContext
from ..errors import GpsError
from ..errors import ProfileNotFoundError
from ..git import Scope
from ..remotes import ssh_test_command
from ..switcher import SwitchResult
from ..switcher import switch_profile
from ..ui import display_gps_error
from ..utils.error_format import escape_markup
from .profiles import print_profiles


def render_switch(result: SwitchResult) -> None:
    profile = result.profile
    console.print(
        f"[bold cyan]Auto-detected Profile Switch: {escape_markup(profile.name)} {result.scope.adverb}[/bold cyan]"
    )
    console.print()

    console.print("[yellow]Step 1: Setting git user configuration...[/yellow]")
    if result.identity_written:
        console.print("[green]✓ Git config updated[/green]")
    console.print(f"  Name:  {escape_markup(profile.display_name_or_unknown())}")
    console.print(f"  Email: {escape_markup(profile.email_or_unknown())}")
    if result.skipped_identity_fields:
        skipped = ", ".join(result.skipped_identity_fields)
        console.print(f"[yellow]⚠ Profile has no {skipped}; left unchanged[/yellow]")
    console.print()

    if result.remotes_checked:
        console.print("[yellow]Step 2: Updating remote URLs for SSH authentication...[/yellow]")
        for change in result.remote_changes:
            console.print(f"[green]✓ Updated {escape_markup(change.remote)} remote[/green]")
            console.print(f"  From: {escape_markup(change.old_url)}")
            console.print(f"  To:   {escape_markup(change.new_url)}")
        if not result.remote_changes:
            console.print("[blue]ℹ Remote URLs already correct[/blue]")
        console.print()

    step = 3 if result.remotes_checked else 2
    host = escape_markup(profile.ssh_host)
    console.print(f"[yellow]Step {step}: SSH authentication configured for {host}[/yellow]")
    if profile.ssh_key:
        console.print(f"  Key: {escape_markup(profile.ssh_key)}")
    console.print(f"[blue]Tip: Test with '{escape_markup(ssh_test_command(profile.ssh_host))}' if needed[/blue]")
    console.print()
    console.print("[green]Auto-detected profile switch complete![/green]")
    console.print(f"Source: {escape_markup(profile.description)}")


@click.command(name="switch")
@click.argument("profile_name", required=False)
@click.argument("scope", required=False, metavar="[local]")
@click.option("--local", "local_flag", is_flag=True, help="Apply to the current repository only")
@click.pass_obj
def switch_cmd(context: GpsContext, profile_name: str | None, scope: str | None, local_flag: bool):
    """Switch profile (globally, or locally with 'local').

    Only 'local' (any case) selects the current repository; any other scope
    word switches globally.
    """
    resolved_scope = Scope.LOCAL if local_flag or (scope or "").lower() == "local" else Scope.GLOBAL

    try:
        result = switch_profile(context, profile_name, resolved_scope)
    except ProfileNotFoundError as exc:
        display_gps_error(console, exc)
        print_profiles(context)
        sys.exit(exc.exit_code)
    except GpsError as exc:
        display_gps_error(console, exc)
        sys.exit(exc.exit_code)

    render_switch(result)


__all__ = ["render_switch", "switch_cmd"]
