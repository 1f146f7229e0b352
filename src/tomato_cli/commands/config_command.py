"""Config commands - Inspect the configuration."""

import typer
from rich.markup import escape

from tomato_cli.config import get_config_service
from tomato_cli.utils.durations import format_human
from tomato_cli.utils.typer_helpers import SuggestingGroup
from tomato_cli.utils.ui.console import get_console
from tomato_cli.utils.ui.formatters import format_info

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management")
console = get_console()


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the resolved configuration."""
    config_service = get_config_service()
    config = config_service.config
    if config_service.created:
        format_info(f"Created a default config file at {config_service.config_path}")

    console.print(f"pomodoro_duration    = [cyan]{format_human(config.pomodoro_duration)}[/cyan]")
    console.print(f"short_break_duration = [cyan]{format_human(config.short_break_duration)}[/cyan]")
    console.print(f"long_break_duration  = [cyan]{format_human(config.long_break_duration)}[/cyan]")
    console.print(f"hooks_directory      = {escape(str(config.hooks_directory))}", highlight=False)
    console.print(f"state_file_path      = {escape(str(config.state_file_path))}", highlight=False)
    console.print(f"history_file_path    = {escape(str(config.history_file_path))}", highlight=False)
    console.print(f"schedule_check       = {str(config.schedule_check).lower()}")


@app.command("path")
@command_wrapper
def config_path() -> None:
    """Print the path of the config file."""
    print(get_config_service().config_path)
