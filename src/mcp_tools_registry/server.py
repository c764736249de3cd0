"""MCP server exposing the registry over stdio.

Tools:
    registry_list            — List tools, filtered by status.
    registry_info            — Details for one tool.
    registry_config_snippet  — Claude config entry for one tool.
    registry_build           — npm install && npm run build for one tool.
    registry_summary         — Counts and names per status.
    registry_help            — Usage notes.

``RegistryTools`` holds the handlers as plain methods returning text, so
they can be exercised without a protocol session. ``create_server`` wires
them into a ``FastMCP`` instance. Registry errors propagate out of the
handlers; FastMCP reports them to the client as error results.
"""

from __future__ import annotations

import json

from mcp.server.fastmcp import FastMCP

from mcp_tools_registry.build import BuildRunner
from mcp_tools_registry.config import RegistryConfig
from mcp_tools_registry.logging_config import setup_logging
from mcp_tools_registry.registry import STATUS_FILTERS, ToolRegistry

SERVER_NAME = "mcp-tools-registry"

HELP_TEXT = """MCP Tools Registry - Help

This tool helps discover, manage, and configure MCP tools.

Available commands:

1. registry_list - List all MCP tools
   Options:
   - status: "all" | "active" | "broken" | "unconfigured" | "archived"

2. registry_info - Get detailed info about a specific tool
   - tool: Tool name (e.g., "brain-manager" or "mcp-brain-manager")

3. registry_config_snippet - Generate config for claude_desktop_config.json
   - tool: Tool name to generate config for

4. registry_build - Build a tool (npm install && npm run build)
   - tool: Tool name to build

5. registry_summary - Get summary statistics

Tool statuses:
- active: Built and configured in Claude
- unconfigured: Has a package.json but is not in Claude config
- broken: Missing package.json, or configured but not built
- archived: Moved to the archived folder

Example workflow:
1. List all tools: registry_list()
2. Find unconfigured: registry_list({ status: "unconfigured" })
3. Get config: registry_config_snippet({ tool: "reminders" })
4. Build if needed: registry_build({ tool: "reminders" })"""


class RegistryTools:
    """Text-returning handlers behind the MCP tools."""

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    def list_tools(self, status: str = "all") -> str:
        records = self.registry.list_tools(status)
        return json.dumps([r.to_summary_dict() for r in records], indent=2)

    def tool_info(self, tool: str) -> str:
        return json.dumps(self.registry.get_tool(tool).to_dict(), indent=2)

    def config_snippet(self, tool: str) -> str:
        snippet = self.registry.config_snippet(tool)
        return (
            'Add this to your claude_desktop_config.json under "mcpServers":'
            f"\n\n{snippet}"
        )

    def build(self, tool: str) -> str:
        return self.registry.build_tool(tool)

    def summary(self) -> str:
        return json.dumps(self.registry.summary(), indent=2)

    def help_text(self) -> str:
        return HELP_TEXT


def create_server(
    config: RegistryConfig,
    build_runner: BuildRunner | None = None,
    max_workers: int = 1,
) -> FastMCP:
    """Build a FastMCP server bound to a registry configuration.

    Args:
        config: Roots to scan.
        build_runner: Override the build mechanism (for testing).
        max_workers: Parallel classification workers per scan.

    Returns:
        A configured ``FastMCP`` instance; call ``run()`` to serve stdio.
    """
    handlers = RegistryTools(
        ToolRegistry(config, build_runner=build_runner, max_workers=max_workers)
    )
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool()
    def registry_list(status: str = "all") -> str:
        """List all MCP tools in the system.

        Args:
            status: Filter by tool status: all, active, broken,
                unconfigured or archived (default: all).
        """
        if status not in STATUS_FILTERS:
            raise ValueError(f"status must be one of: {', '.join(STATUS_FILTERS)}")
        return handlers.list_tools(status)

    @mcp.tool()
    def registry_info(tool: str) -> str:
        """Get detailed information about a specific MCP tool.

        Args:
            tool: Tool name (with or without mcp- prefix).
        """
        return handlers.tool_info(tool)

    @mcp.tool()
    def registry_config_snippet(tool: str) -> str:
        """Generate Claude config snippet for a tool.

        Args:
            tool: Tool name to generate config for.
        """
        return handlers.config_snippet(tool)

    @mcp.tool()
    def registry_build(tool: str) -> str:
        """Build an MCP tool (npm install && npm run build).

        Args:
            tool: Tool name to build.
        """
        return handlers.build(tool)

    @mcp.tool()
    def registry_summary() -> str:
        """Get a summary of MCP tools status."""
        return handlers.summary()

    @mcp.tool()
    def registry_help() -> str:
        """Get help on using the registry."""
        return handlers.help_text()

    return mcp


def main() -> None:
    """Console entry point: serve using environment configuration."""
    setup_logging()
    create_server(RegistryConfig.from_env(), max_workers=4).run()
