"""gps - Git Profile Switcher command-line interface."""

import logging
import sys

import click

from .commands import current_cmd
from .commands import list_cmd
from .commands import switch_cmd
from .console import console
from .errors import GpsError
from .logging_setup import init_json_logging
from .logging_setup import init_verbose_logging
from .paths import create_context
from .ui import display_gps_error
from .utils.help_formatter import GpsGroup

logger = logging.getLogger(__name__)

USAGE = """\
[bold cyan]GPS - Auto-detecting Git Profile Switcher[/bold cyan]
No config file needed - auto-detects from SSH config and git configs

[yellow]Usage:[/yellow]
  gps list                      # Show auto-detected profiles (alias: ls)
  gps current                   # Show current status (alias: show)
  gps switch <profile> \\[local] # Switch profile (alias: use)
  gps help                      # Show this message (also -h, --help)

[yellow]Auto-detects from:[/yellow]
  • ~/.ssh/config (GitHub hosts)
  • ~/.gitconfig (global git config)
  • ~/.gitconfig-* (profile-specific configs)

[yellow]Examples:[/yellow]
  gps switch work               # Switch globally to work profile
  gps switch personal local     # Switch locally (current repo) to personal
"""


def show_usage() -> None:
    console.print(USAGE)


@click.group(
    cls=GpsGroup,
    usage_printer=show_usage,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(package_name="gps-cli")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """GPS - auto-detecting git profile switcher."""
    # Tests and embedders may inject a ready context
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except GpsError as exc:
            display_gps_error(console, exc, verbose=verbose)
            sys.exit(exc.exit_code)

    log_settings = ctx.obj.settings.logging
    init_json_logging(log_settings.path, log_settings.level)
    if verbose:
        init_verbose_logging()
    logger.debug(f"gps invoked in {ctx.obj.cwd} with subcommand {ctx.invoked_subcommand}")

    if ctx.invoked_subcommand is None:
        show_usage()


@cli.command(name="help", context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def help_cmd():
    """Show usage information."""
    show_usage()


cli.add_command(list_cmd)
cli.add_command(current_cmd)
cli.add_command(switch_cmd)
cli.add_alias("ls", "list")
cli.add_alias("show", "current")
cli.add_alias("use", "switch")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
