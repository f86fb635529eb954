"""Tests for the --examples flag on commands and groups."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from homestaff.cli import cli


class TestExamples:
    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (["tasks", "--examples"], "homestaff tasks show task-1"),
            (["tasks", "list", "--examples"], "homestaff -q tasks list"),
            (["tasks", "show", "--examples"], "homestaff --json tasks show task-4"),
            (["maids", "--examples"], "homestaff maids -u owner"),
            (["notifications", "--examples"], "homestaff notifications -u owner"),
            (["status", "--examples"], "homestaff --json status"),
            (["serve", "--examples"], "homestaff serve --transport streamable-http"),
        ],
    )
    def test_examples_printed(self, cli_runner: CliRunner, args: list[str], expected: str) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert "Examples for" in result.output
        assert expected in result.output

    def test_examples_listed_in_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["maids", "--help"])
        assert "--examples" in result.output
