"""Persistence of the current Status in a TOML state file."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from tomato_cli.models.exceptions import CorruptStateError, StorageError
from tomato_cli.models.status import (
    INACTIVE,
    ActiveSession,
    Inactive,
    LongBreak,
    ShortBreak,
    Status,
)
from tomato_cli.utils.logger import get_logger

from .records import (
    record_to_session,
    record_to_timer,
    session_to_record,
    timer_to_record,
)

ACTIVE_TABLE = "Active"
SHORT_BREAK_TABLE = "ShortBreak"
LONG_BREAK_TABLE = "LongBreak"


def dump_status(status: Status) -> str:
    """Serialize a non-inactive status to TOML text."""
    if isinstance(status, ActiveSession):
        document = {ACTIVE_TABLE: session_to_record(status.session)}
    elif isinstance(status, ShortBreak):
        document = {SHORT_BREAK_TABLE: timer_to_record(status.timer)}
    elif isinstance(status, LongBreak):
        document = {LONG_BREAK_TABLE: timer_to_record(status.timer)}
    else:
        raise ValueError("Inactive status has no serialized form")
    return tomli_w.dumps(document)


def parse_status(text: str, source: Path | str = "<state>") -> Status:
    """
    Parse TOML state text into exactly one Status variant.

    Raises:
        CorruptStateError: If the text is not valid TOML or does not hold
            exactly one known table with the expected fields
    """
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise CorruptStateError(f"Failed to parse state file {source}: {e}") from e

    tables = [key for key in document if isinstance(document[key], dict)]
    if len(document) != 1 or len(tables) != 1:
        raise CorruptStateError(
            f"State file {source} must contain exactly one of "
            f"[{ACTIVE_TABLE}], [{SHORT_BREAK_TABLE}] or [{LONG_BREAK_TABLE}]"
        )

    name = tables[0]
    data = document[name]
    try:
        if name == ACTIVE_TABLE:
            return ActiveSession(record_to_session(data))
        if name == SHORT_BREAK_TABLE:
            return ShortBreak(record_to_timer(data))
        if name == LONG_BREAK_TABLE:
            return LongBreak(record_to_timer(data))
    except ValidationError as e:
        raise CorruptStateError(f"Invalid [{name}] in state file {source}: {e}") from e

    raise CorruptStateError(f"Unknown state [{name}] in state file {source}")


class StatusRepository:
    """Loads and saves the current Status."""

    def __init__(self, state_file: Path):
        self.state_file = Path(state_file)

    def load(self) -> Status:
        """Load the status. A missing file means Inactive."""
        try:
            text = self.state_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            return INACTIVE
        except UnicodeDecodeError as e:
            raise CorruptStateError(
                f"State file {self.state_file} is not valid UTF-8: {e}"
            ) from e
        except OSError as e:
            raise StorageError(
                f"Failed to read state file {self.state_file}: {e}"
            ) from e
        return parse_status(text, source=self.state_file)

    def save(self, status: Status) -> None:
        """
        Persist *status*, replacing the whole file.

        Saving Inactive deletes the state file.
        """
        if isinstance(status, Inactive):
            self.delete()
            return

        logger = get_logger()
        content = dump_status(status)
        tmp_file = self.state_file.with_name(self.state_file.name + ".tmp")
        try:
            if not self.state_file.exists():
                logger.info("creating state file %s", self.state_file)
            self.state_file.parent.mkdir(parents=True, exist_ok=True)
            tmp_file.write_text(content, encoding="utf-8")
            os.replace(tmp_file, self.state_file)
        except OSError as e:
            raise StorageError(
                f"Failed to save state file {self.state_file}: {e}"
            ) from e

    def delete(self) -> bool:
        """Delete the state file. Returns True if a file was removed."""
        try:
            self.state_file.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(
                f"Failed to delete state file {self.state_file}: {e}"
            ) from e
        get_logger().info("deleted state file %s", self.state_file)
        return True
