"""``mcp-registry build`` — Install dependencies and build a tool.

Runs ``npm install`` then ``npm run build`` in the tool's directory.
A failed build is reported and not retried. ``--timeout`` bounds each
npm step; a step that runs past it counts as a failed build.

Exit Codes:
    0 — Build succeeded.
    1 — Tool not found, or the build process failed.
"""

from __future__ import annotations

import sys

import click

from mcp_tools_registry.build import NpmBuildRunner
from mcp_tools_registry.exceptions import RegistryError
from mcp_tools_registry.registry import ToolRegistry


@click.command("build")
@click.argument("tool")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds allowed per npm step (default: no limit).",
)
@click.pass_obj
def build_command(obj: dict, tool: str, timeout: float | None) -> None:
    """Build an MCP tool (npm install && npm run build)."""
    registry = ToolRegistry(
        obj["config"],
        build_runner=NpmBuildRunner(timeout=timeout),
        max_workers=obj["workers"],
    )
    try:
        message = registry.build_tool(tool)
    except RegistryError as exc:
        click.echo(f"Error: {exc}")
        sys.exit(1)
    click.echo(message)
