"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from tomato_cli.main import app
from tomato_cli.utils.typer_helpers import suggest_commands

runner = CliRunner()


class TestSuggestCommands:
    def test_close_match(self):
        assert suggest_commands("stauts", ["status", "start", "finish"]) == ["status"]

    def test_no_match(self):
        assert suggest_commands("zzz", ["status", "start"]) == []

    def test_at_most_three(self):
        names = ["start1", "start2", "start3", "start4"]
        assert len(suggest_commands("start", names)) == 3


class TestSuggestingGroup:
    def test_typo_suggests_command(self):
        result = runner.invoke(app, ["stauts"])
        assert result.exit_code == 2
        assert "Did you mean this?" in result.output
        assert "status" in result.output

    def test_typo_in_sub_group(self):
        result = runner.invoke(app, ["break", "stp"])
        assert result.exit_code == 2
        assert "stop" in result.output

    @pytest.mark.parametrize("args", [["frobnicate"], ["break", "frobnicate"]])
    def test_unknown_command_without_suggestion(self, args):
        result = runner.invoke(app, args)
        assert result.exit_code == 2
        assert "Did you mean" not in result.output
