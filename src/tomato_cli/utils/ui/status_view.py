"""Rendering of the current status and the session history."""

from __future__ import annotations

from datetime import datetime

from rich.markup import escape
from rich.table import Table

from tomato_cli.models.session import Session
from tomato_cli.models.status import (
    ActiveSession,
    LongBreak,
    ShortBreak,
    Status,
    current_timer,
)
from tomato_cli.services.hook_service import HookResult
from tomato_cli.utils.durations import format_human, format_kitchen
from tomato_cli.utils.ui.console import get_console
from tomato_cli.utils.ui.formatters import format_warning


def render_template(status: Status, template: str, now: datetime) -> str:
    """Render a ``--format`` template; empty when nothing is running."""
    if isinstance(status, ActiveSession):
        return status.session.format(template, now)
    timer = current_timer(status)
    if timer is None:
        return ""
    return timer.format(template, now)


def print_status(status: Status, now: datetime) -> None:
    """Print a human-readable summary of *status*."""
    console = get_console()

    if isinstance(status, ActiveSession):
        session = status.session
        if session.description:
            console.print(
                f"Current session: [yellow]{escape(session.description)}[/yellow]"
            )
        else:
            console.print("Current session")

        if session.done(now):
            console.print("Status: [bold red]Done[/bold red]")
        else:
            console.print("Status: [bold magenta]Active[/bold magenta]")
        console.print(f"Duration: [cyan]{format_human(session.duration)}[/cyan]")
        if session.tags:
            console.print("Tags:")
            for tag in session.tags:
                console.print(f"\t- [blue]{escape(tag)}[/blue]")
        console.print()
        console.print(f"Time remaining: {format_kitchen(session.remaining(now))}")
        console.print()
        console.print('[dim](use "tomato finish" to archive this session)[/dim]')
        console.print('[dim](use "tomato clear" to discard this session)[/dim]')
        return

    if isinstance(status, (ShortBreak, LongBreak)):
        kind = "long" if isinstance(status, LongBreak) else "short"
        console.print(f"Taking a {kind} break")
        if status.timer.done(now):
            console.print("Status: [bold red]Done[/bold red]")
        console.print()
        console.print(f"Time remaining: {format_kitchen(status.timer.remaining(now))}")
        console.print()
        console.print('[dim](use "tomato break stop" to finish this break)[/dim]')
        return

    console.print("No current session")
    console.print()
    console.print('[dim](use "tomato start" to start a session)[/dim]')
    console.print('[dim](use "tomato break start" to take a break)[/dim]')


def session_to_dict(session: Session) -> dict:
    """Plain mapping of a session for JSON/YAML output."""
    actual = session.actual_duration
    return {
        "started_at": session.started_at.isoformat(),
        "duration": int(session.duration.total_seconds()),
        "finished_at": session.finished_at.isoformat() if session.finished_at else None,
        "actual_duration": int(actual.total_seconds()) if actual is not None else None,
        "description": session.description,
        "tags": session.tags or [],
    }


def print_history_table(sessions: list[Session]) -> None:
    """Print archived sessions as a table."""
    console = get_console()
    if not sessions:
        console.print("[yellow]No sessions archived yet[/yellow]")
        return

    table = Table(title=f"Completed Sessions ({len(sessions)})", show_header=True)
    table.add_column("Date Started", style="blue")
    table.add_column("Duration", style="cyan", justify="right")
    table.add_column("Tags")
    table.add_column("Description")

    for session in sessions:
        table.add_row(
            session.started_at.strftime("%d %b %H:%M"),
            format_human(session.duration),
            escape(",".join(session.tags)) if session.tags else "-",
            escape(session.description) if session.description else "-",
        )

    console.print(table)


def print_hook_result(result: HookResult | None) -> None:
    """Report a hook run; silent when no hook is installed."""
    if result is None:
        return
    console = get_console()
    if result.ok:
        console.print(
            f"[dim]Ran {result.hook.value} hook at [cyan]{escape(str(result.path))}[/cyan][/dim]"
        )
        return
    reason = result.error or f"exit status {result.returncode}"
    format_warning(f"{result.hook.value} hook failed ({reason})")
