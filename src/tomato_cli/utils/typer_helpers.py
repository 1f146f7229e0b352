"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from tomato_cli.utils import exit_codes
from tomato_cli.utils.ui.console import get_console
from tomato_cli.utils.ui.formatters import format_error, format_hint

_MAX_SUGGESTIONS = 3
_CUTOFF = 0.6


def suggest_commands(attempted: str, available: list[str]) -> list[str]:
    """Return up to three known command names close to *attempted*."""
    return get_close_matches(attempted, available, n=_MAX_SUGGESTIONS, cutoff=_CUTOFF)


class SuggestingGroup(TyperGroup):
    """Command group that answers typos with suggestions.

    ``tomato stauts`` prints "Did you mean this? tomato status" and exits
    with the invalid-arguments code.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            attempted = args[0]
            suggestions = suggest_commands(attempted, list(self.commands))
            if not suggestions:
                raise

            prefix = ctx.command_path or ctx.info_name
            format_error(f'unknown command "{attempted}" for "{prefix}"')
            console = get_console()
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {prefix} {suggestion}", highlight=False)
            format_hint(f'(run "{prefix} --help" for all commands)')
            raise typer.Exit(exit_codes.ERROR_INVALID_ARGS) from e
