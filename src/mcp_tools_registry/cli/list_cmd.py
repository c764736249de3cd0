"""``mcp-registry list`` — List MCP tools, optionally filtered by status."""

from __future__ import annotations

import json

import click

from mcp_tools_registry.registry import STATUS_FILTERS, ToolRegistry


@click.command("list")
@click.option(
    "--status",
    type=click.Choice(list(STATUS_FILTERS)),
    default="all",
    help="Filter by tool status (default: all).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def list_command(obj: dict, status: str, output_format: str) -> None:
    """List all MCP tools found under the tool and archive roots."""
    registry = ToolRegistry(obj["config"], max_workers=obj["workers"])
    records = registry.list_tools(status)

    if output_format == "json":
        click.echo(json.dumps([r.to_summary_dict() for r in records], indent=2))
    else:
        from mcp_tools_registry.cli.output import print_tool_list
        print_tool_list(records)
