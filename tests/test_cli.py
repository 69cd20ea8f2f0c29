"""Tests for the root CLI group: global flags, config files and env vars."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from twozhakes.cli import cli

TEST_DATE = "2020-03-07T13:00:00Z"


class TestZoneSelection:
    def test_zone_from_config_file(self, cli_runner: CliRunner, tmp_path: Path):
        (tmp_path / "twozhakes.toml").write_text('zone = "America/Los_Angeles"\n')
        result = cli_runner.invoke(cli, ["extract", TEST_DATE, "hour"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "hour: 5"

    def test_zone_from_env(self, cli_runner: CliRunner):
        result = cli_runner.invoke(
            cli, ["extract", TEST_DATE, "hour"], env={"TWOZHAKES_ZONE": "Asia/Tokyo"}
        )
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "hour: 22"

    def test_flag_beats_env(self, cli_runner: CliRunner):
        result = cli_runner.invoke(
            cli,
            ["-z", "UTC", "extract", TEST_DATE, "hour"],
            env={"TWOZHAKES_ZONE": "Asia/Tokyo"},
        )
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "hour: 13"

    def test_local_zone_from_config(self, cli_runner: CliRunner, tmp_path: Path):
        (tmp_path / "twozhakes.toml").write_text('[zones]\nlocal = "Europe/London"\n')
        result = cli_runner.invoke(cli, ["--json", "parse", "2020-07-01 12:00"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["zone"] == "Europe/London"
        assert data["instant"] == "2020-07-01T11:00:00.000Z"


class TestConfigFile:
    def test_week_rules(self, cli_runner: CliRunner, tmp_path: Path):
        (tmp_path / "twozhakes.toml").write_text("[week]\ndow = 1\ndoy = 4\n")
        result = cli_runner.invoke(cli, ["-z", "UTC", "extract", TEST_DATE, "weekday"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "weekday: 5"

    def test_explicit_config_flag(self, cli_runner: CliRunner, tmp_path: Path):
        config = tmp_path / "other.toml"
        config.write_text("[week]\ndow = 1\ndoy = 4\n")
        result = cli_runner.invoke(
            cli, ["-c", str(config), "-z", "UTC", "extract", TEST_DATE, "weekday"]
        )
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "weekday: 5"

    def test_invalid_toml(self, cli_runner: CliRunner, tmp_path: Path):
        (tmp_path / "twozhakes.toml").write_text("[week\n")
        result = cli_runner.invoke(cli, ["-z", "UTC", "parse", TEST_DATE])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output

    def test_invalid_values(self, cli_runner: CliRunner, tmp_path: Path):
        (tmp_path / "twozhakes.toml").write_text("[week]\ndow = 9\n")
        result = cli_runner.invoke(cli, ["-z", "UTC", "parse", TEST_DATE])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestLoggingFlags:
    def test_verbose_logs_to_stderr_only(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["-v", "--log-json", "-z", "UTC", "parse", TEST_DATE])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "2020-03-07T13:00:00.000Z"
