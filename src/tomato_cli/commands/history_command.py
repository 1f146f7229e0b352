"""History command - List archived sessions."""

import typer

from tomato_cli.services.timer_service import get_timer_service
from tomato_cli.utils import exit_codes
from tomato_cli.utils.ui.formatters import OUTPUT_FORMATS, dump_data
from tomato_cli.utils.ui.status_view import print_history_table, session_to_dict

from .decorators import AppError, command_wrapper


@command_wrapper
def history(
    output: str = typer.Option(
        "table", "--output", "-o", help="Output format: table, json or yaml"
    ),
    json: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """List all archived sessions."""
    if json:
        output = "json"
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}', use one of: {', '.join(OUTPUT_FORMATS)}",
            exit_code=exit_codes.ERROR_INVALID_ARGS,
        )

    sessions = get_timer_service().history()

    if output == "table":
        print_history_table(sessions)
    else:
        dump_data([session_to_dict(s) for s in sessions], output)
