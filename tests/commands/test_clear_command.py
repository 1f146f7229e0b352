"""Tests for the clear command."""

from typer.testing import CliRunner

from tomato_cli.main import app

runner = CliRunner()


class TestClearCommand:
    def test_clear_discards_session(self, tmp_dirs):
        runner.invoke(app, ["start", "Abandoned"])
        result = runner.invoke(app, ["clear"])

        assert result.exit_code == 0
        assert "Cleared the current session" in result.output
        assert not (tmp_dirs / "state" / "current.toml").exists()
        assert not (tmp_dirs / "data" / "history.toml").exists()

    def test_nothing_to_clear(self, tmp_dirs):
        result = runner.invoke(app, ["clear"])
        assert result.exit_code == 0
        assert "Nothing to clear" in result.output

    def test_clear_corrupt_state(self, tmp_dirs):
        state_file = tmp_dirs / "state" / "current.toml"
        state_file.parent.mkdir(parents=True)
        state_file.write_text("}}} not toml")

        result = runner.invoke(app, ["clear"])

        assert result.exit_code == 0
        assert not state_file.exists()
        assert "No current session" in runner.invoke(app, ["status"]).output

    def test_stop_hook(self, tmp_dirs):
        hooks = tmp_dirs / "config" / "hooks"
        hooks.mkdir(parents=True)
        marker = tmp_dirs / "stopped"
        hook = hooks / "stop"
        hook.write_text(f'#!/bin/sh\ntouch "{marker}"\n')
        hook.chmod(0o755)

        runner.invoke(app, ["break", "start", "--long"])
        runner.invoke(app, ["clear"])

        assert marker.exists()
