"""Break commands - Take a short or long break."""

import typer

from tomato_cli.models.status import BreakKind, break_kind
from tomato_cli.services.timer_service import get_timer_service
from tomato_cli.utils.clock import local_now
from tomato_cli.utils.durations import DURATION_GRAMMAR, format_human, parse_duration
from tomato_cli.utils.typer_helpers import SuggestingGroup
from tomato_cli.utils.ui.formatters import format_success
from tomato_cli.utils.ui.progress import follow_timer
from tomato_cli.utils.ui.status_view import print_hook_result

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Take a short or long break")


@app.command("start")
@command_wrapper
def start_break(
    duration: str | None = typer.Option(
        None, "--duration", "-d", help=f"Break length, {DURATION_GRAMMAR}"
    ),
    long: bool = typer.Option(False, "--long", "-l", help="Take a long break"),
    progress: bool = typer.Option(
        False, "--progress", "-p", help="Show a progress bar until the break ends"
    ),
) -> None:
    """Start a break."""
    kind = BreakKind.LONG if long else BreakKind.SHORT
    length = parse_duration(duration) if duration else None

    service = get_timer_service()
    timer = service.new_break_timer(kind, local_now(), length)
    transition = service.start_break(kind, timer)

    format_success(
        f"Started a {format_human(timer.duration)} {kind.value} break, "
        f"ends at {timer.ends_at.strftime('%H:%M')}"
    )
    print_hook_result(transition.hook)

    if progress:
        follow_timer(timer)


@app.command("stop")
@command_wrapper
def stop_break() -> None:
    """Finish the current break."""
    service = get_timer_service()
    transition = service.stop_break(local_now())
    format_success(f"Finished {break_kind(transition.previous).value} break")
    print_hook_result(transition.hook)
