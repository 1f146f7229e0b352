"""Kitchen-timer primitive shared by focus sessions and breaks."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from tomato_cli.utils.durations import format_kitchen

ZERO = timedelta(0)

_TOKEN_RE = re.compile(r"%[dtrRsSeE]")


def render_template(template: str, tokens: dict[str, str]) -> str:
    """Substitute ``%x`` tokens in a single pass; unknown tokens pass through."""
    return _TOKEN_RE.sub(lambda m: tokens.get(m.group(0), m.group(0)), template)


@dataclass(frozen=True)
class Timer:
    """A start instant plus a duration.

    ``started_at`` must be timezone-aware. All time arithmetic takes ``now``
    as an argument so results are deterministic.
    """

    started_at: datetime
    duration: timedelta

    def __post_init__(self) -> None:
        if self.duration < ZERO:
            raise ValueError("Timer duration must not be negative")

    @classmethod
    def start(cls, now: datetime, duration: timedelta) -> Timer:
        """Create a timer starting at *now*, truncated to whole seconds."""
        return cls(started_at=now.replace(microsecond=0), duration=duration)

    @property
    def ends_at(self) -> datetime:
        """Instant at which the timer runs out."""
        return self.started_at + self.duration

    def elapsed(self, now: datetime) -> timedelta:
        """Time passed since start, clamped to ``[0, duration]``."""
        return min(max(now - self.started_at, ZERO), self.duration)

    def remaining(self, now: datetime) -> timedelta:
        """Time left until the end, clamped to ``[0, duration]``."""
        return min(max(self.duration - self.elapsed(now), ZERO), self.duration)

    def done(self, now: datetime) -> bool:
        """Whether *now* is strictly past the end of the timer."""
        return now > self.ends_at

    def template_tokens(self, now: datetime) -> dict[str, str]:
        remaining = self.remaining(now)
        return {
            "%d": "",
            "%t": "",
            "%r": format_kitchen(remaining),
            "%R": str(int(remaining.total_seconds())),
            "%s": self.started_at.isoformat(),
            "%S": str(int(self.started_at.timestamp())),
            "%e": self.ends_at.isoformat(),
            "%E": str(int(self.ends_at.timestamp())),
        }

    def format(self, template: str, now: datetime) -> str:
        """Render *template*; ``%d`` and ``%t`` are empty for a bare timer."""
        return render_template(template, self.template_tokens(now))
