"""Custom Click group for the vbox CLI.

This module provides a Click Group that:
- resolves short command aliases (``r`` for ``start``)
- displays contextual help when usage errors occur
- turns vboxctl errors raised by any subcommand into a diagnostic and exit code
"""

from typing import Any

import click

from vboxctl.errors import VBoxCtlError

COMMAND_ALIASES = {
    "r": "start",
}


class VBoxGroup(click.Group):
    """Click group with aliases, auto-help on usage errors and error exits."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        # Report the canonical name so the subcommand's usage line reads "vbox start"
        _, cmd, remaining = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, remaining

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the subcommand, handling usage errors and vboxctl errors."""
        try:
            return super().invoke(ctx)
        except click.exceptions.UsageError as e:
            click.echo(f"Error: {e.format_message()}", err=True)

            # Prefer the subcommand context so its own help is shown
            error_ctx = e.ctx if e.ctx else ctx

            click.echo("", err=True)
            click.echo(error_ctx.get_help(), err=True)
            error_ctx.exit(e.exit_code)
        except VBoxCtlError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(e.exit_code)
