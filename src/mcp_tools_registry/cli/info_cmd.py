"""``mcp-registry info`` and ``mcp-registry config-snippet``.

Both look up a single tool by name, accepting the name with or without
the ``mcp-`` prefix. An unknown name exits with code 1.
"""

from __future__ import annotations

import json
import sys

import click

from mcp_tools_registry.exceptions import ToolNotFoundError
from mcp_tools_registry.registry import ToolRegistry

SNIPPET_HINT = 'Add this to your claude_desktop_config.json under "mcpServers":'


@click.command("info")
@click.argument("tool")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def info_command(obj: dict, tool: str, output_format: str) -> None:
    """Show detailed information about a single MCP tool.

    TOOL is the directory name, e.g. "reminders" or "mcp-reminders".
    """
    registry = ToolRegistry(obj["config"], max_workers=obj["workers"])
    try:
        record = registry.get_tool(tool)
    except ToolNotFoundError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(record.to_dict(), indent=2))
    else:
        from mcp_tools_registry.cli.output import print_tool_detail
        print_tool_detail(record)


@click.command("config-snippet")
@click.argument("tool")
@click.option(
    "--raw", is_flag=True, default=False,
    help="Print only the JSON snippet, without the instruction line.",
)
@click.pass_obj
def config_snippet_command(obj: dict, tool: str, raw: bool) -> None:
    """Generate the Claude Desktop config entry for a tool."""
    registry = ToolRegistry(obj["config"], max_workers=obj["workers"])
    try:
        snippet = registry.config_snippet(tool)
    except ToolNotFoundError as exc:
        click.echo(f"Error: {exc}")
        sys.exit(1)

    if not raw:
        click.echo(SNIPPET_HINT)
        click.echo("")
    click.echo(snippet)
