"""Start command - Start a focus session."""

import typer

from tomato_cli.services.timer_service import get_timer_service
from tomato_cli.utils.clock import local_now
from tomato_cli.utils.durations import DURATION_GRAMMAR, format_human, parse_duration
from tomato_cli.utils.ui.formatters import format_success
from tomato_cli.utils.ui.progress import follow_timer
from tomato_cli.utils.ui.status_view import print_hook_result

from .decorators import command_wrapper


def collect_tags(tag: list[str] | None, tags: str | None) -> list[str] | None:
    """Merge repeated --tag options with a comma-separated --tags value."""
    collected = list(tag or [])
    if tags:
        collected.extend(tags.split(","))
    cleaned = [t.strip() for t in collected if t.strip()]
    return cleaned or None


@command_wrapper
def start(
    description: str | None = typer.Argument(
        None, help="Description of the task you're focusing on"
    ),
    duration: str | None = typer.Option(
        None, "--duration", "-d", help=f"Session length, {DURATION_GRAMMAR}"
    ),
    tag: list[str] | None = typer.Option(
        None, "--tag", "-t", help="Tag for this session (repeatable)"
    ),
    tags: str | None = typer.Option(None, "--tags", help="Comma-separated tags"),
    progress: bool = typer.Option(
        False, "--progress", "-p", help="Show a progress bar until the session ends"
    ),
) -> None:
    """Start a focus session."""
    length = parse_duration(duration) if duration else None

    service = get_timer_service()
    session = service.new_session(
        local_now(), length, description=description, tags=collect_tags(tag, tags)
    )
    transition = service.start_session(session)

    format_success(
        f"Started a {format_human(session.duration)} session, "
        f"ends at {session.ends_at.strftime('%H:%M')}"
    )
    print_hook_result(transition.hook)

    if progress:
        follow_timer(session.timer)
