"""Output formatters for messages and machine-readable dumps."""

import json
from typing import Any

import yaml
from rich.markup import escape

from tomato_cli.utils.ui.console import get_console

OUTPUT_FORMATS = ("table", "json", "yaml")


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {escape(message)}")


def format_hint(message: str) -> None:
    """Display a dimmed usage hint."""
    get_console().print(f"[dim]{escape(message)}[/dim]", highlight=False)


def dump_data(data: Any, output_format: str) -> None:
    """Print *data* as JSON or YAML on plain stdout."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), end="")
    else:
        raise ValueError(f"Unsupported output format: {output_format}")
