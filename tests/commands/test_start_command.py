"""Tests for the start command."""

import tomllib
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tomato_cli.commands.start_command import collect_tags
from tomato_cli.main import app

runner = CliRunner()

T0 = datetime(2024, 3, 27, 12, 0, 0, tzinfo=timezone(timedelta(hours=-6)))


def _start(args, now=T0):
    with patch("tomato_cli.commands.start_command.local_now", return_value=now):
        return runner.invoke(app, ["start", *args])


def _state(tmp_dirs) -> dict:
    with open(tmp_dirs / "state" / "current.toml", "rb") as f:
        return tomllib.load(f)


class TestCollectTags:
    def test_none(self):
        assert collect_tags(None, None) is None

    def test_repeated_and_comma_separated(self):
        assert collect_tags(["work"], "a, b,,") == ["work", "a", "b"]

    def test_blank_only(self):
        assert collect_tags([" "], ",") is None


class TestStartCommand:
    def test_start_default(self, tmp_dirs):
        result = _start([])

        assert result.exit_code == 0
        assert "Started a 25m session" in result.output
        assert "12:25" in result.output
        assert _state(tmp_dirs) == {"Active": {"started_at": 1711562400, "duration": 1500}}

    def test_start_with_description_tags_and_duration(self, tmp_dirs):
        result = _start(["Write report", "-t", "work", "--tags", "deep,long", "-d", "50m"])

        assert result.exit_code == 0
        active = _state(tmp_dirs)["Active"]
        assert active["description"] == "Write report"
        assert active["tags"] == ["work", "deep", "long"]
        assert active["duration"] == 3000

    def test_bare_seconds_duration(self, tmp_dirs):
        _start(["--duration", "90"])
        assert _state(tmp_dirs)["Active"]["duration"] == 90

    def test_invalid_duration(self, tmp_dirs):
        result = _start(["--duration", "soon"])
        assert result.exit_code == 2
        assert "Failed to parse duration" in result.output
        assert not (tmp_dirs / "state" / "current.toml").exists()

    def test_already_running(self, tmp_dirs):
        _start(["first"])
        before = (tmp_dirs / "state" / "current.toml").read_text()

        result = _start(["second"], now=T0 + timedelta(minutes=1))

        assert result.exit_code == 3
        assert "There is already an unfinished session" in result.output
        assert (tmp_dirs / "state" / "current.toml").read_text() == before

    def test_on_break(self, tmp_dirs):
        with patch("tomato_cli.commands.break_command.local_now", return_value=T0):
            runner.invoke(app, ["break", "start"])
        result = _start([])
        assert result.exit_code == 3
        assert "You are currently on a break" in result.output

    def test_progress(self, tmp_dirs):
        with patch("tomato_cli.commands.start_command.follow_timer") as mock_follow:
            result = _start(["--progress"])
        assert result.exit_code == 0
        mock_follow.assert_called_once()

    @pytest.mark.parametrize("hook_body, expected", [("exit 0", "Ran session-start hook"), ("exit 7", "session-start hook failed")])
    def test_hook_reported(self, tmp_dirs, hook_body, expected):
        hooks = tmp_dirs / "config" / "hooks"
        hooks.mkdir(parents=True)
        hook = hooks / "session-start"
        hook.write_text(f"#!/bin/sh\n{hook_body}\n")
        hook.chmod(0o755)

        result = _start([])

        assert result.exit_code == 0
        assert expected in result.output
