"""Custom Click group with command aliases.

GpsGroup resolves short aliases (``ls``, ``show``, ``use``) to their
commands and reports command-line mistakes as gps errors with exit status 1
instead of Click's usage errors. ``-h``/``--help`` print the same usage text
as ``gps help`` when a usage printer is given.
"""

from collections.abc import Callable

import click
from click import Context

from ..console import console
from ..errors import InvalidUsageError
from ..errors import UnknownCommandError
from ..ui.error_display import display_gps_error


class GpsGroup(click.Group):
    """Click group supporting ``aliases`` and gps-style command-line errors."""

    def __init__(self, *args, usage_printer: Callable[[], None] | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.aliases: dict[str, str] = {}
        self.usage_printer = usage_printer

    def add_alias(self, alias: str, command_name: str) -> None:
        self.aliases[alias] = command_name

    def get_command(self, ctx: Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        target = self.aliases.get(cmd_name)
        if target is None:
            return None
        return super().get_command(ctx, target)

    def get_help_option(self, ctx: Context) -> click.Option | None:
        help_names = self.get_help_option_names(ctx)
        if self.usage_printer is None or not help_names or not self.add_help_option:
            return super().get_help_option(ctx)

        def show_usage(ctx: Context, param: click.Parameter, value: bool) -> None:
            if not value or ctx.resilient_parsing:
                return
            self.usage_printer()
            ctx.exit()

        return click.Option(
            help_names,
            is_flag=True,
            is_eager=True,
            expose_value=False,
            callback=show_usage,
            help="Show usage information and exit.",
        )

    def resolve_command(self, ctx: Context, args: list[str]):
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None and not ctx.resilient_parsing and not cmd_name.startswith("-"):
            display_gps_error(console, UnknownCommandError(cmd_name))
            ctx.exit(UnknownCommandError.exit_code)
        command_name, command, remaining = super().resolve_command(ctx, args)
        # Report the canonical name so aliases share one command path
        return (command.name if command is not None else command_name), command, remaining

    def make_context(self, info_name, args, parent=None, **extra) -> Context:
        # Options of the group itself are parsed here
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            self._usage_failed(exc)

    def invoke(self, ctx: Context):
        # Subcommand arguments are parsed inside Group.invoke
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            self._usage_failed(exc)

    def _usage_failed(self, exc: click.UsageError):
        error = InvalidUsageError(exc.format_message())
        display_gps_error(console, error)
        raise click.exceptions.Exit(error.exit_code) from exc
