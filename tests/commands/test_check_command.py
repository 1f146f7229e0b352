"""Tests for the check command."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from typer.testing import CliRunner

from tomato_cli.main import app

runner = CliRunner()

T0 = datetime(2024, 3, 27, 12, 0, 0, tzinfo=timezone(timedelta(hours=-6)))


def _write_state(tmp_dirs, text):
    state_file = tmp_dirs / "state" / "current.toml"
    state_file.parent.mkdir(parents=True, exist_ok=True)
    state_file.write_text(text)
    return state_file


def _check(now):
    with patch("tomato_cli.commands.check_command.local_now", return_value=now):
        return runner.invoke(app, ["check"])


class TestCheckCommand:
    def test_nothing_running(self, tmp_dirs):
        result = _check(T0)
        assert result.exit_code == 0
        assert "Nothing to finish" in result.output

    def test_running_session_untouched(self, tmp_dirs):
        state_file = _write_state(tmp_dirs, "[Active]\nstarted_at = 1711562400\nduration = 1500\n")
        result = _check(T0 + timedelta(minutes=25))
        assert "Nothing to finish" in result.output
        assert state_file.exists()

    def test_elapsed_session_archived(self, tmp_dirs):
        state_file = _write_state(tmp_dirs, "[Active]\nstarted_at = 1711562400\nduration = 1500\n")
        result = _check(T0 + timedelta(minutes=25, seconds=1))

        assert result.exit_code == 0
        assert "Finished focus session" in result.output
        assert not state_file.exists()
        assert (tmp_dirs / "data" / "history.toml").exists()

    def test_elapsed_break(self, tmp_dirs):
        _write_state(tmp_dirs, "[LongBreak]\nstarted_at = 1711562400\nduration = 900\n")
        result = _check(T0 + timedelta(minutes=16))
        assert "Finished long break" in result.output
        assert not (tmp_dirs / "data" / "history.toml").exists()

    def test_repeated_check_is_noop(self, tmp_dirs):
        _write_state(tmp_dirs, "[ShortBreak]\nstarted_at = 1711562400\nduration = 300\n")
        later = T0 + timedelta(hours=1)
        assert "Finished short break" in _check(later).output
        second = _check(later)
        assert second.exit_code == 0
        assert "Nothing to finish" in second.output
