"""``mcp-registry summary`` — Tool counts and names per status."""

from __future__ import annotations

import json

import click

from mcp_tools_registry.registry import ToolRegistry


@click.command("summary")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def summary_command(obj: dict, output_format: str) -> None:
    """Summarize MCP tools by status."""
    registry = ToolRegistry(obj["config"], max_workers=obj["workers"])
    summary = registry.summary()

    if output_format == "json":
        click.echo(json.dumps(summary, indent=2))
    else:
        from mcp_tools_registry.cli.output import print_summary
        print_summary(summary)
