"""The current-activity slot: exactly one of four states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from .session import Session
from .timer import Timer


class BreakKind(str, Enum):
    """Length class of a break."""

    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class Inactive:
    """No session or break is running."""


@dataclass(frozen=True)
class ActiveSession:
    """A focus session is running, or has elapsed without being finished."""

    session: Session


@dataclass(frozen=True)
class ShortBreak:
    """A short break is running."""

    timer: Timer


@dataclass(frozen=True)
class LongBreak:
    """A long break is running."""

    timer: Timer


Status: TypeAlias = Inactive | ActiveSession | ShortBreak | LongBreak
BreakStatus: TypeAlias = ShortBreak | LongBreak

INACTIVE = Inactive()


def make_break(kind: BreakKind, timer: Timer) -> BreakStatus:
    """Build the break variant matching *kind*."""
    if kind is BreakKind.LONG:
        return LongBreak(timer)
    return ShortBreak(timer)


def break_kind(status: BreakStatus) -> BreakKind:
    if isinstance(status, LongBreak):
        return BreakKind.LONG
    return BreakKind.SHORT


def current_timer(status: Status) -> Timer | None:
    """Return the timer behind *status*, or None when inactive."""
    if isinstance(status, ActiveSession):
        return status.session.timer
    if isinstance(status, (ShortBreak, LongBreak)):
        return status.timer
    return None


def describe(status: Status) -> str:
    """Short human label for *status*."""
    if isinstance(status, ActiveSession):
        return "focus session"
    if isinstance(status, ShortBreak):
        return "short break"
    if isinstance(status, LongBreak):
        return "long break"
    return "inactive"
