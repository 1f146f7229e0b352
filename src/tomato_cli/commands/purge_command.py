"""Purge command - Delete the state and history files."""

import typer
from rich.markup import escape

from tomato_cli.config import get_config_service
from tomato_cli.services.timer_service import get_timer_service
from tomato_cli.utils.ui.console import get_console
from tomato_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper

console = get_console()


@command_wrapper
def purge(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    include_config: bool = typer.Option(
        False, "--include-config", help="Also delete the config file"
    ),
) -> None:
    """Delete the current session and the whole history."""
    if not yes:
        console.print("[bold red]WARNING: This deletes the current session and ALL history![/bold red]")
        console.print("This action cannot be undone.")
        if not typer.confirm("Are you sure?"):
            format_info("Cancelled")
            raise typer.Exit(0)

    service = get_timer_service()
    removed = service.purge()
    for path in removed:
        console.print(f"Removed [cyan]{escape(str(path))}[/cyan]")

    if include_config:
        config_service = get_config_service()
        if config_service.delete_config():
            console.print(f"Removed [cyan]{escape(str(config_service.config_path))}[/cyan]")

    format_success("All timer data has been deleted")
