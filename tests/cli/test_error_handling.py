"""Tests for CLI error handling edge cases.

Verifies graceful handling of:
    - A tool root that is a file.
    - Missing required arguments.
    - A tool root that does not exist.
"""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from mcp_tools_registry.cli.main import cli


class TestRootErrors:
    def test_root_is_a_file(self, runner: CliRunner, tmp_path: Path) -> None:
        root = tmp_path / "Code"
        root.write_text("not a directory")
        result = runner.invoke(cli, ["--root", str(root), "list"])
        assert result.exit_code == 2

    def test_missing_root_lists_nothing(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, [
            "--root", str(tmp_path / "nowhere"),
            "--claude-config", str(tmp_path / "c.json"),
            "list", "--format", "json",
        ])
        assert result.exit_code == 0
        assert result.output.strip().endswith("[]")


class TestArgumentErrors:
    def test_info_requires_tool(self, runner: CliRunner, empty_args: list[str]) -> None:
        result = runner.invoke(cli, [*empty_args, "info"])
        assert result.exit_code == 2
        assert "Missing argument" in result.output or "Usage" in result.output

    def test_unknown_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["frobnicate"])
        assert result.exit_code == 2
