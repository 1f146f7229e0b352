"""Domain models for the Pomodoro timer."""

from .exceptions import (
    ConfigError,
    CorruptStateError,
    DurationParseError,
    InvalidTransitionError,
    StorageError,
    TomatoError,
)
from .session import Session
from .status import (
    INACTIVE,
    ActiveSession,
    BreakKind,
    Inactive,
    LongBreak,
    ShortBreak,
    Status,
)
from .timer import Timer

__all__ = [
    "ActiveSession",
    "BreakKind",
    "ConfigError",
    "CorruptStateError",
    "DurationParseError",
    "INACTIVE",
    "Inactive",
    "InvalidTransitionError",
    "LongBreak",
    "Session",
    "ShortBreak",
    "Status",
    "StorageError",
    "Timer",
    "TomatoError",
]
