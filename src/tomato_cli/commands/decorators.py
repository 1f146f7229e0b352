"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from tomato_cli.models.exceptions import (
    ConfigError,
    CorruptStateError,
    DurationParseError,
    InvalidTransitionError,
    TomatoError,
)
from tomato_cli.utils import exit_codes
from tomato_cli.utils.logger import get_logger
from tomato_cli.utils.ui.formatters import format_error, format_hint

_EXIT_CODES: dict[type[TomatoError], int] = {
    InvalidTransitionError: exit_codes.ERROR_INVALID_TRANSITION,
    CorruptStateError: exit_codes.ERROR_CORRUPT_FILE,
    ConfigError: exit_codes.ERROR_CORRUPT_FILE,
    DurationParseError: exit_codes.ERROR_INVALID_ARGS,
}


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def exit_code_for(error: TomatoError) -> int:
    """Map a domain error to its semantic exit code."""
    for error_type, code in _EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return exit_codes.ERROR_GENERAL


def command_wrapper(func: Callable) -> Callable:
    """Log the command and turn errors into a message plus an exit code."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except (AppError, TomatoError) as e:
            elapsed = time.monotonic() - start
            code = e.exit_code if isinstance(e, AppError) else exit_code_for(e)
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s",
                cmd,
                elapsed,
                exit_codes.get_exit_code_name(code),
                str(e),
            )
            format_error(str(e))
            if isinstance(e, CorruptStateError):
                format_hint('(fix the file by hand or run "tomato clear" / "tomato purge")')
            raise typer.Exit(code=code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            # Generic fallback for unexpected crashes
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
