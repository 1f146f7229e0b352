"""Run user-provided executables on timer lifecycle events.

Hooks are best-effort notifications: a missing hook is a no-op and a
failing one is logged, never raised.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from tomato_cli.utils.logger import get_logger


class Hook(str, Enum):
    """Lifecycle events. The value is the executable's file name."""

    SESSION_START = "session-start"
    SESSION_END = "session-end"
    SHORT_BREAK_START = "short-break-start"
    SHORT_BREAK_END = "short-break-end"
    LONG_BREAK_START = "long-break-start"
    LONG_BREAK_END = "long-break-end"
    STOP = "stop"


@dataclass
class HookResult:
    """Outcome of one hook execution."""

    hook: Hook
    path: Path
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.returncode == 0


class HookRunner:
    """Looks up and executes hooks in a directory."""

    def __init__(self, hooks_directory: Path):
        self.hooks_directory = Path(hooks_directory)

    def path_for(self, hook: Hook) -> Path:
        return self.hooks_directory / hook.value

    def run(self, hook: Hook) -> HookResult | None:
        """
        Execute the hook for *hook* if one is installed.

        Returns:
            None when no hook file exists, otherwise the HookResult
        """
        path = self.path_for(hook)
        if not path.is_file():
            return None

        logger = get_logger()
        result = HookResult(hook=hook, path=path)

        if not os.access(path, os.X_OK):
            result.error = "hook file is not executable"
            logger.warning("skipping %s hook %s: %s", hook.value, path, result.error)
            return result

        logger.info("running %s hook %s", hook.value, path)
        try:
            completed = subprocess.run(
                [str(path)],
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except (OSError, ValueError) as e:
            result.error = str(e)
            logger.warning("failed to execute %s hook %s: %s", hook.value, path, e)
            return result

        result.returncode = completed.returncode
        result.stdout = completed.stdout
        result.stderr = completed.stderr

        if completed.stdout:
            logger.info("%s hook stdout: %s", hook.value, completed.stdout.strip())
        if completed.stderr:
            logger.info("%s hook stderr: %s", hook.value, completed.stderr.strip())
        if completed.returncode != 0:
            logger.warning(
                "%s hook exited with status %d", hook.value, completed.returncode
            )
        return result
