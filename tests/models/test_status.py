"""Unit tests for tomato_cli.models.status."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from tomato_cli.models.session import Session
from tomato_cli.models.status import (
    INACTIVE,
    ActiveSession,
    BreakKind,
    Inactive,
    LongBreak,
    ShortBreak,
    break_kind,
    current_timer,
    describe,
    make_break,
)
from tomato_cli.models.timer import Timer

T0 = datetime(2024, 3, 27, 12, 0, 0, tzinfo=timezone(timedelta(hours=-6)))
FIVE = timedelta(minutes=5)


class TestVariants:
    def test_inactive_singleton_equality(self):
        assert INACTIVE == Inactive()

    def test_breaks_of_different_kind_differ(self):
        timer = Timer(T0, FIVE)
        assert ShortBreak(timer) != LongBreak(timer)

    def test_active_session_equality(self):
        a = ActiveSession(Session.start(T0, FIVE, description="x"))
        b = ActiveSession(Session.start(T0, FIVE, description="x"))
        assert a == b


class TestHelpers:
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [(BreakKind.SHORT, ShortBreak), (BreakKind.LONG, LongBreak)],
    )
    def test_make_break(self, kind, expected):
        status = make_break(kind, Timer(T0, FIVE))
        assert isinstance(status, expected)
        assert break_kind(status) is kind

    def test_current_timer(self):
        timer = Timer(T0, FIVE)
        assert current_timer(INACTIVE) is None
        assert current_timer(ShortBreak(timer)) is timer
        assert current_timer(LongBreak(timer)) is timer
        assert current_timer(ActiveSession(Session(timer=timer))) is timer

    @pytest.mark.parametrize(
        ("status", "label"),
        [
            (INACTIVE, "inactive"),
            (ActiveSession(Session(timer=Timer(T0, FIVE))), "focus session"),
            (ShortBreak(Timer(T0, FIVE)), "short break"),
            (LongBreak(Timer(T0, FIVE)), "long break"),
        ],
    )
    def test_describe(self, status, label):
        assert describe(status) == label
