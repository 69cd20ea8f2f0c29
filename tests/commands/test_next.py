"""Tests for the next and election commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from twozhakes.cli import cli

UTC = ["-z", "UTC"]


class TestNextCommand:
    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (["weekday", "4", "--from", "2020-03-30"], "Thursday, April 2nd 2020"),
            (["weekday", "4", "--from", "2020-04-02"], "Thursday, April 9th 2020"),
            (["weekday", "4", "--inclusive", "--from", "2020-04-02"], "Thursday, April 2nd 2020"),
            (["month", "3", "--from", "2020-03-30"], "Wednesday, April 1st 2020"),
            (["month", "3", "--from", "2020-05-01"], "Thursday, April 1st 2021"),
        ],
    )
    def test_next(self, cli_runner: CliRunner, args: list[str], expected: str):
        result = cli_runner.invoke(cli, [*UTC, "next", *args])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == expected

    def test_json(self, cli_runner: CliRunner):
        result = cli_runner.invoke(
            cli, ["--json", *UTC, "next", "month", "0", "--from", "2020-03-30"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["instant"] == "2021-01-01T00:00:00.000Z"
        assert data["target"] == "month 0"

    @pytest.mark.parametrize("args", [["weekday", "7"], ["month", "12"], ["month", "-1"]])
    def test_out_of_range(self, cli_runner: CliRunner, args: list[str]):
        result = cli_runner.invoke(cli, [*UTC, "next", *args])
        assert result.exit_code == 2


class TestElectionCommand:
    def test_from_odd_year(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, [*UTC, "election", "--from", "2015-10-01"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "2016-11-08"

    def test_json(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["--json", *UTC, "election", "--from", "2020-12-01"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["date"] == "2022-11-08"
        assert data["zone"] == "America/New_York"
        assert data["instant"] == "2022-11-08T05:00:00.000Z"
