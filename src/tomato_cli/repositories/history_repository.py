"""Append-only archive of completed sessions."""

from __future__ import annotations

import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from tomato_cli.models.exceptions import CorruptStateError, StorageError
from tomato_cli.models.session import Session
from tomato_cli.utils.logger import get_logger

from .records import record_to_session, session_to_record

HISTORY_TABLE = "pomodoros"


class HistoryRepository:
    """Reads and appends ``[[pomodoros]]`` records in a TOML file."""

    def __init__(self, history_file: Path):
        self.history_file = Path(history_file)

    def load(self) -> list[Session]:
        """Load all archived sessions in append order. Missing file is empty."""
        try:
            with open(self.history_file, "rb") as f:
                document = tomllib.load(f)
        except FileNotFoundError:
            return []
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise CorruptStateError(
                f"Failed to parse history file {self.history_file}: {e}"
            ) from e
        except OSError as e:
            raise StorageError(
                f"Failed to read history file {self.history_file}: {e}"
            ) from e

        entries = document.get(HISTORY_TABLE, [])
        if not isinstance(entries, list):
            raise CorruptStateError(
                f"History file {self.history_file} must hold [[{HISTORY_TABLE}]] tables"
            )

        sessions = []
        for index, entry in enumerate(entries):
            try:
                sessions.append(record_to_session(entry))
            except ValidationError as e:
                raise CorruptStateError(
                    f"Invalid history entry #{index + 1} in {self.history_file}: {e}"
                ) from e
        return sessions

    def append(self, session: Session) -> None:
        """Append one session record without rewriting earlier entries."""
        record = tomli_w.dumps({HISTORY_TABLE: [session_to_record(session)]})
        try:
            self.history_file.parent.mkdir(parents=True, exist_ok=True)
            needs_separator = (
                self.history_file.exists() and self.history_file.stat().st_size > 0
            )
            with open(self.history_file, "a", encoding="utf-8") as f:
                if needs_separator:
                    f.write("\n")
                f.write(record)
        except OSError as e:
            raise StorageError(
                f"Failed to append to history file {self.history_file}: {e}"
            ) from e
        get_logger().info("archived session to %s", self.history_file)

    def purge(self) -> bool:
        """Delete the history file. Returns True if a file was removed."""
        try:
            self.history_file.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(
                f"Failed to delete history file {self.history_file}: {e}"
            ) from e
        get_logger().info("deleted history file %s", self.history_file)
        return True
