"""Tests for the root trisum CLI."""

import pytest
from click.testing import CliRunner

from trisum import __version__
from trisum.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestRootGroup:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "trisum" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_args_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage" in result.output

    @pytest.mark.parametrize("cmd", ["sum", "compare", "benchmark", "validate", "values"])
    def test_commands_registered(self, cli_runner: CliRunner, cmd: str) -> None:
        result = cli_runner.invoke(cli, [cmd, "--help"])
        assert result.exit_code == 0

    @pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
    def test_global_flags_accepted(self, cli_runner: CliRunner, flag: str) -> None:
        result = cli_runner.invoke(cli, [flag, "--version"])
        assert result.exit_code == 0

    def test_config_option_accepted(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-c", "/nonexistent/trisum.toml", "--version"])
        assert result.exit_code == 0
