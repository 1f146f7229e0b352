"""Duration parsing and formatting helpers."""

from __future__ import annotations

import re
from datetime import timedelta

from tomato_cli.models.exceptions import DurationParseError

DURATION_GRAMMAR = "<HOURS>h<MINUTES>m<SECONDS>s (each part optional), e.g. 22m30s"

_DURATION_RE = re.compile(r"^(?:(?P<h>\d+)h)?(?:(?P<m>\d+)m)?(?:(?P<s>\d+)s)?$")


def parse_duration(text: str) -> timedelta:
    """
    Parse a duration such as ``25m``, ``1h30m``, ``90s`` or ``1500``.

    A bare integer is read as a number of seconds.

    Raises:
        DurationParseError: If the text does not match the grammar
    """
    value = text.strip().lower()
    if value.isdigit():
        return timedelta(seconds=int(value))

    match = _DURATION_RE.match(value)
    if not value or match is None:
        raise DurationParseError(
            f"Failed to parse duration '{text}', format is {DURATION_GRAMMAR}"
        )

    hours = int(match.group("h") or 0)
    minutes = int(match.group("m") or 0)
    seconds = int(match.group("s") or 0)
    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


def _split(delta: timedelta) -> tuple[int, int, int]:
    total = max(0, int(delta.total_seconds()))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return hours, minutes, seconds


def format_kitchen(delta: timedelta) -> str:
    """Format like a kitchen timer: ``MM:SS``, or ``HH:MM:SS`` past one hour."""
    hours, minutes, seconds = _split(delta)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def format_human(delta: timedelta) -> str:
    """Format compactly for humans, e.g. ``1h5m`` or ``22m30s``."""
    hours, minutes, seconds = _split(delta)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds:
        parts.append(f"{seconds}s")
    return "".join(parts) or "0s"
