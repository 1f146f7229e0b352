"""Pomodoro state machine.

Every operation loads the current status from the state file, checks that
the transition is legal, persists the new status and only then fires the
matching hook. Rejected transitions raise InvalidTransitionError and leave
the files untouched. Times are always passed in; nothing here reads the
clock.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from pathlib import Path

from tomato_cli.config import Config, get_config_service
from tomato_cli.models.exceptions import InvalidTransitionError
from tomato_cli.models.session import Session
from tomato_cli.models.status import (
    INACTIVE,
    ActiveSession,
    BreakKind,
    Inactive,
    LongBreak,
    ShortBreak,
    Status,
    current_timer,
    describe,
    make_break,
)
from tomato_cli.models.timer import Timer
from tomato_cli.repositories import HistoryRepository, StatusRepository
from tomato_cli.utils.logger import get_logger

from .hook_service import Hook, HookResult, HookRunner
from .scheduler_service import CheckScheduler

ALREADY_UNFINISHED = "There is already an unfinished session"
ON_BREAK = "You are currently on a break"
FINISH_BEFORE_BREAK = "Finish your current session before taking a break"
NO_ACTIVE_SESSION = 'No active session. Start one with "tomato start"'
NOT_ON_BREAK = "You are not on a break"


@dataclass
class Transition:
    """Result of a successful state change."""

    previous: Status
    current: Status
    hook: HookResult | None = None
    archived: Session | None = None
    scheduled: bool = False


class TimerService:
    """Applies state transitions against the configured files."""

    def __init__(
        self,
        config: Config,
        hook_runner: HookRunner | None = None,
        scheduler: CheckScheduler | None = None,
        status_repository: StatusRepository | None = None,
        history_repository: HistoryRepository | None = None,
    ):
        self.config = config
        self.hook_runner = hook_runner or HookRunner(config.hooks_directory)
        self.scheduler = scheduler
        self.status_repository = status_repository or StatusRepository(
            config.state_file_path
        )
        self.history_repository = history_repository or HistoryRepository(
            config.history_file_path
        )

    # Reads

    def status(self) -> Status:
        return self.status_repository.load()

    def history(self) -> list[Session]:
        return self.history_repository.load()

    # Factories using configured defaults

    def new_session(
        self,
        now: datetime,
        duration: timedelta | None = None,
        description: str | None = None,
        tags: list[str] | None = None,
    ) -> Session:
        return Session.start(
            now,
            duration if duration is not None else self.config.pomodoro_duration,
            description=description,
            tags=tags,
        )

    def new_break_timer(
        self, kind: BreakKind, now: datetime, duration: timedelta | None = None
    ) -> Timer:
        if duration is None:
            duration = (
                self.config.long_break_duration
                if kind is BreakKind.LONG
                else self.config.short_break_duration
            )
        return Timer.start(now, duration)

    # Transitions

    def start_session(self, session: Session) -> Transition:
        """Inactive -> ActiveSession."""
        previous = self.status()
        if isinstance(previous, ActiveSession):
            raise InvalidTransitionError(ALREADY_UNFINISHED)
        if isinstance(previous, (ShortBreak, LongBreak)):
            raise InvalidTransitionError(ON_BREAK)

        current = ActiveSession(session)
        self.status_repository.save(current)
        get_logger().info(
            "started %ss session (%s)",
            int(session.duration.total_seconds()),
            session.description or "no description",
        )
        hook = self.hook_runner.run(Hook.SESSION_START)
        scheduled = self._schedule(session.timer)
        return Transition(previous, current, hook=hook, scheduled=scheduled)

    def start_break(self, kind: BreakKind, timer: Timer) -> Transition:
        """Inactive -> ShortBreak / LongBreak."""
        previous = self.status()
        if isinstance(previous, ActiveSession):
            raise InvalidTransitionError(FINISH_BEFORE_BREAK)
        if isinstance(previous, (ShortBreak, LongBreak)):
            raise InvalidTransitionError(ON_BREAK)

        current = make_break(kind, timer)
        self.status_repository.save(current)
        get_logger().info(
            "started %s break of %ss", kind.value, int(timer.duration.total_seconds())
        )
        start_hook = (
            Hook.LONG_BREAK_START if kind is BreakKind.LONG else Hook.SHORT_BREAK_START
        )
        hook = self.hook_runner.run(start_hook)
        scheduled = self._schedule(timer)
        return Transition(previous, current, hook=hook, scheduled=scheduled)

    def finish(self, now: datetime) -> Transition:
        """
        Finish the current session or break.

        A focus session is stamped with *now* and archived to the history;
        breaks are never archived.
        """
        previous = self.status()
        return self._finish(previous, now)

    def stop_break(self, now: datetime) -> Transition:
        """Finish the current break; rejected when not on a break."""
        previous = self.status()
        if not isinstance(previous, (ShortBreak, LongBreak)):
            raise InvalidTransitionError(NOT_ON_BREAK)
        return self._finish(previous, now)

    def check(self, now: datetime) -> Transition | None:
        """
        Finish the current timer if it has run out.

        Safe to call any number of times: returns None when there is nothing
        to finish yet.
        """
        previous = self.status()
        timer = current_timer(previous)
        if timer is None or not timer.done(now):
            return None
        get_logger().info("%s ran out, finishing", describe(previous))
        return self._finish(previous, now)

    def clear(self) -> bool:
        """
        Discard the current session or break without archiving it.

        The state file is removed without being parsed, so this also recovers
        from a corrupt state file. Returns True if there was something to clear.
        """
        removed = self.status_repository.delete()
        if removed:
            self.hook_runner.run(Hook.STOP)
        return removed

    def purge(self) -> list[Path]:
        """Delete the state and history files. Returns the removed paths."""
        removed = []
        if self.status_repository.delete():
            removed.append(self.status_repository.state_file)
        if self.history_repository.purge():
            removed.append(self.history_repository.history_file)
        return removed

    # Internals

    def _finish(self, previous: Status, now: datetime) -> Transition:
        archived = None
        if isinstance(previous, ActiveSession):
            session = replace(previous.session)
            session.finish(now)
            self.history_repository.append(session)
            archived = session
            end_hook = Hook.SESSION_END
        elif isinstance(previous, ShortBreak):
            end_hook = Hook.SHORT_BREAK_END
        elif isinstance(previous, LongBreak):
            end_hook = Hook.LONG_BREAK_END
        elif isinstance(previous, Inactive):
            raise InvalidTransitionError(NO_ACTIVE_SESSION)
        else:
            raise TypeError(f"Unknown status: {previous!r}")

        self.status_repository.save(INACTIVE)
        get_logger().info("finished %s", describe(previous))
        hook = self.hook_runner.run(end_hook)
        return Transition(previous, INACTIVE, hook=hook, archived=archived)

    def _schedule(self, timer: Timer) -> bool:
        if self.scheduler is None:
            return False
        return self.scheduler.schedule(timer.duration)


def get_timer_service() -> TimerService:
    """Build a TimerService from the active configuration."""
    config_service = get_config_service()
    config = config_service.config
    scheduler = (
        CheckScheduler(config_path=config_service.config_path)
        if config.schedule_check
        else None
    )
    return TimerService(config, scheduler=scheduler)
