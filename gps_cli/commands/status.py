"""Current identity and remote status command."""

from __future__ import annotations

import click

from ..console import console
from ..context import GpsContext
from ..remotes import ssh_test_command
from ..status import StatusReport
from ..status import collect_status
from ..utils.error_format import escape_markup


def _value(value: str | None, fallback: str) -> str:
    return escape_markup(value) if value else f"[dim]{fallback}[/dim]"


def render_status(report: StatusReport) -> None:
    console.print("[yellow]Global Configuration:[/yellow]")
    console.print(f"  Name:  {_value(report.global_identity.name, 'Not set')}")
    console.print(f"  Email: {_value(report.global_identity.email, 'Not set')}")

    repository = report.repository
    console.print()
    if repository is None:
        console.print("[yellow]Not in a git repository[/yellow]")
        return

    console.print("[yellow]Local Configuration (current repository):[/yellow]")
    console.print(f"  Name:  {_value(repository.identity.name, 'Using global')}")
    console.print(f"  Email: {_value(repository.identity.email, 'Using global')}")
    if repository.root is not None:
        console.print(f"  Repo:  {escape_markup(repository.root)}")

    console.print()
    console.print("[yellow]Remote URLs and SSH Hosts:[/yellow]")
    if not repository.remotes:
        console.print("  [dim]No remotes configured[/dim]")
    for remote in repository.remotes:
        console.print(f"  {escape_markup(remote.name)}: {escape_markup(remote.url)}")
        if remote.ssh_host:
            console.print(f"    SSH Host: [cyan]{escape_markup(remote.ssh_host)}[/cyan]")
            console.print(f"    Test: [blue]{escape_markup(ssh_test_command(remote.ssh_host))}[/blue]")


@click.command(name="current", context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
@click.pass_obj
def current_cmd(context: GpsContext):
    """Show current identity and remote SSH hosts."""
    console.print("[bold cyan]Auto-detected Git Profile Status:[/bold cyan]")
    console.print()
    render_status(collect_status(context))


__all__ = ["current_cmd", "render_status"]
