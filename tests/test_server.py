"""Tests for the MCP server handlers and tool registration."""

from __future__ import annotations

import asyncio
import json

import pytest

from mcp_tools_registry.config import RegistryConfig
from mcp_tools_registry.exceptions import BuildError, ToolNotFoundError
from mcp_tools_registry.registry import ToolRegistry
from mcp_tools_registry.server import HELP_TEXT, RegistryTools, create_server

from tests.discovery.helpers import create_tool, write_claude_config
from tests.fakes import FakeBuildRunner


@pytest.fixture
def populated(registry_config: RegistryConfig) -> RegistryConfig:
    create_tool(registry_config.candidate_root, "mcp-reminders")
    create_tool(registry_config.candidate_root, "mcp-weather", manifest=None)
    write_claude_config(registry_config.config_document_path, ["reminders"])
    return registry_config


@pytest.fixture
def handlers(populated: RegistryConfig) -> RegistryTools:
    return RegistryTools(ToolRegistry(populated, build_runner=FakeBuildRunner()))


class TestRegistryTools:
    def test_list_returns_summary_rows(self, handlers: RegistryTools) -> None:
        rows = json.loads(handlers.list_tools())
        assert [row["name"] for row in rows] == ["mcp-reminders", "mcp-weather"]
        assert rows[0]["status"] == "active"
        assert rows[0]["tools"] == 0
        assert rows[1]["error"] == "Missing or invalid package.json"

    def test_list_filtered(self, handlers: RegistryTools) -> None:
        rows = json.loads(handlers.list_tools("broken"))
        assert [row["name"] for row in rows] == ["mcp-weather"]

    def test_info(self, handlers: RegistryTools) -> None:
        info = json.loads(handlers.tool_info("reminders"))
        assert info["name"] == "mcp-reminders"
        assert info["configured"] is True
        assert info["tools"] == []
        assert "error" not in info

    def test_info_unknown(self, handlers: RegistryTools) -> None:
        with pytest.raises(ToolNotFoundError):
            handlers.tool_info("ghost")

    def test_config_snippet_has_hint(self, handlers: RegistryTools) -> None:
        text = handlers.config_snippet("reminders")
        hint, snippet = text.split("\n\n", 1)
        assert hint == 'Add this to your claude_desktop_config.json under "mcpServers":'
        assert "reminders" in json.loads(snippet)

    def test_build(self, handlers: RegistryTools) -> None:
        assert handlers.build("reminders") == "Successfully built mcp-reminders"

    def test_build_failure(self, populated: RegistryConfig) -> None:
        failing = RegistryTools(ToolRegistry(populated, build_runner=FakeBuildRunner("boom")))
        with pytest.raises(BuildError, match="Failed to build mcp-reminders: boom"):
            failing.build("reminders")

    def test_summary(self, handlers: RegistryTools) -> None:
        summary = json.loads(handlers.summary())
        assert summary["summary"]["total"] == 2
        assert summary["details"]["broken"][0]["name"] == "mcp-weather"

    def test_help(self, handlers: RegistryTools) -> None:
        assert handlers.help_text() == HELP_TEXT
        assert "registry_config_snippet" in HELP_TEXT


class TestCreateServer:
    def test_registers_all_tools(self, registry_config: RegistryConfig) -> None:
        server = create_server(registry_config)
        tools = asyncio.run(server.list_tools())
        assert {tool.name for tool in tools} == {
            "registry_list",
            "registry_info",
            "registry_config_snippet",
            "registry_build",
            "registry_summary",
            "registry_help",
        }

    def test_tool_descriptions(self, registry_config: RegistryConfig) -> None:
        server = create_server(registry_config)
        tools = {tool.name: tool for tool in asyncio.run(server.list_tools())}
        assert "List all MCP tools" in tools["registry_list"].description
        assert "tool" in tools["registry_info"].inputSchema["properties"]
