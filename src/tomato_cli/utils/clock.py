"""Wall-clock access for the command layer."""

from datetime import datetime


def local_now() -> datetime:
    """Return the current time as a timezone-aware local datetime."""
    return datetime.now().astimezone()
