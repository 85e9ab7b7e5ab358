"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from oops.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Keep configuration out of the home directory."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("OOPS_CONFIG", str(path))
    return path


class TestMatchCommand:
    """Test the match command."""

    def test_correction(self, runner: CliRunner) -> None:
        """Test a plain typo."""
        result = runner.invoke(cli, ["match", "hepl"])

        assert result.exit_code == 0
        assert "CORRECTION" in result.output
        assert "help" in result.output

    def test_permission_filtering(self, runner: CliRunner) -> None:
        """Test that gated commands need the permission."""
        result = runner.invoke(cli, ["match", "telport"])

        assert result.exit_code == 0
        assert "NO MATCH" in result.output

        result = runner.invoke(cli, ["match", "-p", "cmd.tp", "telport"])

        assert "teleport" in result.output

    def test_valid_name(self, runner: CliRunner) -> None:
        """Test a name that needs no correction."""
        result = runner.invoke(cli, ["match", "/version"])

        assert "VALID" in result.output


class TestOtherCommands:
    """Test the remaining commands."""

    def test_commands_table(self, runner: CliRunner) -> None:
        """Test listing the catalog."""
        result = runner.invoke(cli, ["commands"])

        assert result.exit_code == 0
        assert "teleport" in result.output
        assert "cmd.tp" in result.output

    def test_init_config(self, runner: CliRunner, config_path) -> None:
        """Test writing the default configuration."""
        result = runner.invoke(cli, ["init-config"])

        assert result.exit_code == 0
        assert json.loads(config_path.read_text())["aliases"] == ["oops", "fix"]

        result = runner.invoke(cli, ["init-config", str(config_path)])

        assert "Already exists" in result.output

    def test_shell_session(self, runner: CliRunner, config_path) -> None:
        """Test a short interactive session."""
        result = runner.invoke(cli, ["shell"], input="hepl\noops\nexit\n")

        assert result.exit_code == 0
        assert "Did you mean help?" in result.output
        assert "Available commands" in result.output
        assert "Stopping the console" in result.output
