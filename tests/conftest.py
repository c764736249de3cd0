"""Shared fixtures for registry tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from mcp_tools_registry.config import RegistryConfig


@pytest.fixture
def code_root(tmp_path: Path) -> Path:
    """Create an empty tool root simulating ``~/Code``."""
    root = tmp_path / "Code"
    root.mkdir()
    return root


@pytest.fixture
def claude_config_path(tmp_path: Path) -> Path:
    """Location of the Claude config. Not created by default."""
    return tmp_path / "Claude" / "claude_desktop_config.json"


@pytest.fixture
def registry_config(code_root: Path, claude_config_path: Path) -> RegistryConfig:
    """Registry configuration pointing at the synthetic roots."""
    return RegistryConfig(
        candidate_root=code_root,
        archive_root=code_root / "archived",
        config_document_path=claude_config_path,
    )
