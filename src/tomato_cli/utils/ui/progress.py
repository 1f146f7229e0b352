"""Foreground progress bar for a running timer."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import datetime

from rich.console import Console
from rich.progress import BarColumn, Progress, TextColumn

from tomato_cli.models.timer import Timer
from tomato_cli.utils.clock import local_now
from tomato_cli.utils.durations import format_kitchen
from tomato_cli.utils.ui.console import get_console


def follow_timer(
    timer: Timer,
    console: Console | None = None,
    clock: Callable[[], datetime] = local_now,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """
    Show elapsed time, a bar and remaining time until *timer* runs out.

    Only displays; the state file is never touched.

    Returns:
        True if the timer ran out, False if the user interrupted
    """
    total = max(timer.duration.total_seconds(), 1)

    with Progress(
        TextColumn("{task.fields[elapsed]}"),
        BarColumn(bar_width=40),
        TextColumn("{task.fields[remaining]}"),
        console=console or get_console(),
    ) as progress:
        task = progress.add_task("timer", total=total, elapsed="", remaining="")
        try:
            while True:
                now = clock()
                progress.update(
                    task,
                    completed=timer.elapsed(now).total_seconds(),
                    elapsed=format_kitchen(timer.elapsed(now)),
                    remaining=format_kitchen(timer.remaining(now)),
                )
                if timer.done(now):
                    return True
                sleep(1)
        except KeyboardInterrupt:
            return False
