"""Custom exceptions for Tomato."""


class TomatoError(Exception):
    """Base exception for all Tomato errors."""


class InvalidTransitionError(TomatoError):
    """Raised when a command is not allowed in the current timer state."""


class CorruptStateError(TomatoError):
    """Raised when the state or history file cannot be parsed."""


class StorageError(TomatoError):
    """Raised when reading or writing a state/history file fails."""


class DurationParseError(TomatoError, ValueError):
    """Raised when a user-supplied duration string is malformed."""


class ConfigError(TomatoError):
    """Raised when the configuration file cannot be loaded."""
