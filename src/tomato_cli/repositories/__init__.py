"""File-backed storage for the current status and the session history."""

from .history_repository import HistoryRepository
from .status_repository import StatusRepository, dump_status, parse_status

__all__ = ["HistoryRepository", "StatusRepository", "dump_status", "parse_status"]
