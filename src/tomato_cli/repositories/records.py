"""On-disk record shapes for the state and history files.

Instants are stored as integer Unix seconds and durations as integer
seconds, so a record never depends on the writer's timezone.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, Field, StrictInt, StrictStr

from tomato_cli.models.session import Session
from tomato_cli.models.timer import Timer


class TimerRecord(BaseModel):
    """Serialized form of a Timer."""

    started_at: StrictInt
    duration: StrictInt = Field(ge=0)


class SessionRecord(TimerRecord):
    """Serialized form of a Session."""

    description: StrictStr | None = None
    tags: list[StrictStr] | None = None
    finished_at: StrictInt | None = None


def to_timestamp(value: datetime) -> int:
    return int(value.timestamp())


def from_timestamp(value: int) -> datetime:
    return datetime.fromtimestamp(value).astimezone()


def timer_to_record(timer: Timer) -> dict:
    return TimerRecord(
        started_at=to_timestamp(timer.started_at),
        duration=int(timer.duration.total_seconds()),
    ).model_dump()


def session_to_record(session: Session) -> dict:
    record = SessionRecord(
        started_at=to_timestamp(session.started_at),
        duration=int(session.duration.total_seconds()),
        description=session.description,
        tags=session.tags,
        finished_at=(
            to_timestamp(session.finished_at) if session.finished_at else None
        ),
    )
    return record.model_dump(exclude_none=True)


def record_to_timer(data: dict) -> Timer:
    """Build a Timer from a raw mapping. Raises pydantic.ValidationError."""
    record = TimerRecord.model_validate(data)
    return Timer(
        started_at=from_timestamp(record.started_at),
        duration=timedelta(seconds=record.duration),
    )


def record_to_session(data: dict) -> Session:
    """Build a Session from a raw mapping. Raises pydantic.ValidationError."""
    record = SessionRecord.model_validate(data)
    return Session(
        timer=Timer(
            started_at=from_timestamp(record.started_at),
            duration=timedelta(seconds=record.duration),
        ),
        description=record.description,
        tags=record.tags,
        finished_at=(
            from_timestamp(record.finished_at)
            if record.finished_at is not None
            else None
        ),
    )
