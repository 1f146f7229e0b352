"""Status command - Show the current session or break."""

import typer

from tomato_cli.models.status import current_timer
from tomato_cli.services.timer_service import get_timer_service
from tomato_cli.utils.clock import local_now
from tomato_cli.utils.ui.progress import follow_timer
from tomato_cli.utils.ui.status_view import print_status, render_template

from .decorators import command_wrapper

FORMAT_HELP = (
    "Print a custom status line. Tokens: %d description, %t tags, "
    "%r remaining (MM:SS), %R remaining seconds, %s/%S start (ISO/Unix), "
    "%e/%E end (ISO/Unix)"
)


@command_wrapper
def status(
    format_: str | None = typer.Option(None, "--format", "-f", help=FORMAT_HELP),
    progress: bool = typer.Option(
        False, "--progress", "-p", help="Show a progress bar until the timer ends"
    ),
) -> None:
    """Show the current session or break."""
    service = get_timer_service()
    current = service.status()
    now = local_now()

    if format_ is not None:
        print(render_template(current, format_, now))
        return

    print_status(current, now)

    timer = current_timer(current)
    if progress and timer is not None:
        follow_timer(timer)
