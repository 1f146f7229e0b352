"""Focus session (a single Pomodoro)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from .timer import Timer, render_template


@dataclass
class Session:
    """Represents one focus interval."""

    timer: Timer
    description: str | None = None
    tags: list[str] | None = None
    finished_at: datetime | None = None

    @classmethod
    def start(
        cls,
        now: datetime,
        duration: timedelta,
        description: str | None = None,
        tags: list[str] | None = None,
    ) -> Session:
        """Create a new session starting at *now*."""
        session = cls(timer=Timer.start(now, duration))
        if description is not None:
            session.set_description(description)
        if tags:
            session.set_tags(tags)
        return session

    @property
    def started_at(self) -> datetime:
        return self.timer.started_at

    @property
    def duration(self) -> timedelta:
        """Length the session was set for."""
        return self.timer.duration

    @property
    def ends_at(self) -> datetime:
        return self.timer.ends_at

    @property
    def is_finished(self) -> bool:
        return self.finished_at is not None

    @property
    def actual_duration(self) -> timedelta | None:
        """Time between start and finish, or None while unfinished."""
        if self.finished_at is None:
            return None
        return self.finished_at - self.started_at

    def elapsed(self, now: datetime) -> timedelta:
        return self.timer.elapsed(now)

    def remaining(self, now: datetime) -> timedelta:
        return self.timer.remaining(now)

    def done(self, now: datetime) -> bool:
        return self.timer.done(now)

    def set_description(self, description: str) -> None:
        self.description = description

    def set_tags(self, tags: list[str]) -> None:
        self.tags = list(tags)

    def finish(self, now: datetime) -> None:
        """Record the completion instant (never earlier than the start)."""
        self.finished_at = max(now.replace(microsecond=0), self.started_at)

    def format(self, template: str, now: datetime) -> str:
        """
        Render a status template for this session.

        Recognized tokens:
            %d - description
            %t - tags, comma-separated
            %r - remaining time as MM:SS (HH:MM:SS past one hour)
            %R - remaining time in seconds
            %s / %S - start time as ISO-8601 / Unix timestamp
            %e / %E - end time as ISO-8601 / Unix timestamp

        Anything else is copied through unchanged.
        """
        tokens = self.timer.template_tokens(now)
        tokens["%d"] = self.description or ""
        tokens["%t"] = ",".join(self.tags or [])
        return render_template(template, tokens)
