"""Shared fixtures for CLI tests.

Builds a populated tool root and returns the root options that point the
CLI at it, so no test touches the real ``~/Code`` or Claude config.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.discovery.helpers import SAMPLE_SOURCE, create_tool, write_claude_config


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def root_args(tmp_path: Path) -> list[str]:
    """Populate a tool root and return the matching CLI root options.

    Contents:
        mcp-reminders  active (2 discovered tools)
        mcp-weather    unconfigured
        mcp-notes      broken (not built)
        mcp-legacy     archived
    """
    root = tmp_path / "Code"
    create_tool(root, "mcp-reminders", source=SAMPLE_SOURCE)
    create_tool(root, "mcp-weather")
    create_tool(root, "mcp-notes", built=False)
    create_tool(root / "archived", "mcp-legacy")
    config = write_claude_config(tmp_path / "claude.json", ["reminders", "notes"])
    return ["--root", str(root), "--claude-config", str(config)]


@pytest.fixture
def empty_args(tmp_path: Path) -> list[str]:
    """Root options for an empty tool root with no Claude config."""
    root = tmp_path / "Code"
    root.mkdir()
    return ["--root", str(root), "--claude-config", str(tmp_path / "missing.json")]
