"""Unit tests for command decorators."""

from unittest.mock import patch

import pytest
import typer
from typer.testing import CliRunner

from tomato_cli.commands.decorators import AppError, command_wrapper, exit_code_for
from tomato_cli.models.exceptions import (
    ConfigError,
    CorruptStateError,
    DurationParseError,
    InvalidTransitionError,
    StorageError,
    TomatoError,
)

runner = CliRunner()


def _app_for(func) -> typer.Typer:
    app_test = typer.Typer()
    app_test.command()(func)
    return app_test


class TestAppError:
    def test_default_exit_code(self):
        err = AppError("something went wrong")
        assert str(err) == "something went wrong"
        assert err.exit_code == 1

    def test_custom_exit_code(self):
        assert AppError("bad flag", exit_code=2).exit_code == 2


class TestExitCodeFor:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (InvalidTransitionError("x"), 3),
            (CorruptStateError("x"), 4),
            (ConfigError("x"), 4),
            (DurationParseError("x"), 2),
            (StorageError("x"), 1),
            (TomatoError("x"), 1),
        ],
    )
    def test_mapping(self, error, code):
        assert exit_code_for(error) == code


class TestCommandWrapper:
    def test_result_passes_through(self):
        called = []

        @command_wrapper
        def my_cmd():
            called.append(True)

        my_cmd()
        assert called == [True]

    def test_preserves_name(self):
        @command_wrapper
        def my_cmd():
            """Doc."""

        assert my_cmd.__name__ == "my_cmd"
        assert my_cmd.__doc__ == "Doc."

    def test_app_error_caught_and_reraises_exit(self):
        @command_wrapper
        def failing_cmd():
            raise AppError("test error", exit_code=2)

        with patch("tomato_cli.commands.decorators.format_error") as mock_fmt:
            result = runner.invoke(_app_for(failing_cmd), [])

        assert result.exit_code == 2
        mock_fmt.assert_called_once_with("test error")

    def test_domain_error_mapped_to_exit_code(self):
        @command_wrapper
        def transition_cmd():
            raise InvalidTransitionError("You are not on a break")

        result = runner.invoke(_app_for(transition_cmd), [])

        assert result.exit_code == 3
        assert "You are not on a break" in result.output

    def test_corrupt_state_adds_hint(self):
        @command_wrapper
        def corrupt_cmd():
            raise CorruptStateError("broken")

        with patch("tomato_cli.commands.decorators.format_hint") as mock_hint:
            result = runner.invoke(_app_for(corrupt_cmd), [])

        assert result.exit_code == 4
        mock_hint.assert_called_once()

    def test_typer_exit_reraises(self):
        @command_wrapper
        def exit_cmd():
            raise typer.Exit(code=0)

        result = runner.invoke(_app_for(exit_cmd), [])
        assert result.exit_code == 0

    def test_unexpected_exception_caught(self):
        @command_wrapper
        def crashing_cmd():
            raise RuntimeError("unexpected crash")

        with patch("tomato_cli.commands.decorators.format_error") as mock_fmt:
            result = runner.invoke(_app_for(crashing_cmd), [])

        assert result.exit_code == 1
        mock_fmt.assert_called_once()
        assert "unexpected crash" in mock_fmt.call_args[0][0]

    def test_failure_is_logged(self, tmp_path):
        @command_wrapper
        def failing_cmd():
            raise InvalidTransitionError("nope")

        runner.invoke(_app_for(failing_cmd), [])

        log = (tmp_path / "log" / "tomato.log").read_text()
        assert "command failed: failing_cmd" in log
        assert "ERROR_INVALID_TRANSITION" in log
