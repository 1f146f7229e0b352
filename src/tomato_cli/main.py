"""Main entry point for Tomato."""

from pathlib import Path

import typer

from tomato_cli import __version__
from tomato_cli.commands import (
    break_command,
    check_command,
    clear_command,
    config_command,
    finish_command,
    history_command,
    purge_command,
    start_command,
    status_command,
)
from tomato_cli.config import set_config_path
from tomato_cli.utils.typer_helpers import SuggestingGroup
from tomato_cli.utils.ui.console import get_console

# Create main app with custom group class
app = typer.Typer(
    name="tomato",
    cls=SuggestingGroup,
    help="A Pomodoro timer for the command line",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def main_callback(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        envvar="TOMATO_CONFIG",
        help="Config file to use [default: <user config dir>/tomato/config.toml]",
    ),
) -> None:
    """A Pomodoro timer for the command line."""
    set_config_path(config)


# Add subcommands
app.add_typer(break_command.app, name="break", help="Take a short or long break")
app.add_typer(config_command.app, name="config", help="Configuration management")

# Add top-level commands
app.command("status")(status_command.status)
app.command("start")(start_command.start)
app.command("finish")(finish_command.finish)
app.command("clear")(clear_command.clear)
app.command("check")(check_command.check)
app.command("history")(history_command.history)
app.command("purge")(purge_command.purge)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Tomato[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
