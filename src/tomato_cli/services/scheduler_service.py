"""Ask systemd to run ``tomato check`` when a timer runs out."""

from __future__ import annotations

import subprocess
import sys
from datetime import timedelta
from pathlib import Path

from tomato_cli.utils.logger import get_logger


class CheckScheduler:
    """Schedules a one-shot ``check`` command through ``systemd-run --user``."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path

    def check_command(self) -> list[str]:
        command = [sys.executable, "-m", "tomato_cli"]
        if self.config_path is not None:
            command += ["--config", str(self.config_path)]
        return command + ["check"]

    def schedule(self, delay: timedelta) -> bool:
        """Schedule the check after *delay*. Returns False if scheduling failed."""
        logger = get_logger()
        # one extra second: a timer is not done at its exact end instant
        seconds = max(0, int(delay.total_seconds())) + 1
        args = [
            "systemd-run",
            "--user",
            f"--on-active={seconds}",
            "--timer-property=AccuracySec=100ms",
            *self.check_command(),
        ]
        try:
            result = subprocess.run(args, capture_output=True, text=True, check=False)
        except FileNotFoundError:
            logger.warning("systemd-run not found, check not scheduled")
            return False
        except OSError as e:
            logger.warning("failed to run systemd-run: %s", e)
            return False

        if result.stderr:
            logger.info("systemd-run: %s", result.stderr.strip())
        if result.returncode != 0:
            logger.warning("systemd-run exited with status %d", result.returncode)
            return False
        return True
