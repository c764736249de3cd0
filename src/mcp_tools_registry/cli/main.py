"""MCP Tools Registry CLI: inventory local MCP servers.

Entry point for the ``mcp-registry`` command-line tool. Registers all
subcommands under a single Click group. Root options select the tool
root, archive root and Claude config; otherwise they come from the
environment (see ``mcp_tools_registry.config``).

Commands:
    list            — List tools, optionally filtered by status.
    info            — Show details for one tool.
    config-snippet  — Print the Claude config entry for a tool.
    build           — Run npm install && npm run build for a tool.
    summary         — Counts and names per status.
    serve           — Run the registry as an MCP server on stdio.

Usage::

    mcp-registry list
    mcp-registry list --status broken
    mcp-registry --root ~/Code info reminders
    mcp-registry config-snippet reminders
    mcp-registry build reminders
    mcp-registry summary --format json
    mcp-registry serve
"""

from __future__ import annotations

import sys

import click

from mcp_tools_registry import __version__
from mcp_tools_registry.cli.build_cmd import build_command
from mcp_tools_registry.cli.info_cmd import config_snippet_command, info_command
from mcp_tools_registry.cli.list_cmd import list_command
from mcp_tools_registry.cli.serve_cmd import serve_command
from mcp_tools_registry.cli.summary_cmd import summary_command
from mcp_tools_registry.config import RegistryConfig
from mcp_tools_registry.exceptions import ConfigurationError
from mcp_tools_registry.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--root",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory containing mcp-* tools (env: MCP_REGISTRY_ROOT).",
)
@click.option(
    "--archive",
    type=click.Path(file_okay=False),
    default=None,
    help="Archive directory (env: MCP_REGISTRY_ARCHIVE, default: ROOT/archived).",
)
@click.option(
    "--claude-config",
    type=click.Path(dir_okay=False),
    default=None,
    help="Claude Desktop config file (env: MCP_REGISTRY_CLAUDE_CONFIG).",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=4,
    show_default=True,
    help="Parallel directory classification workers.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    root: str | None,
    archive: str | None,
    claude_config: str | None,
    workers: int,
    verbose: bool,
) -> None:
    """MCP Tools Registry: discover, classify and build local MCP servers.

    Scans mcp-* directories, checks them against the Claude Desktop
    config, and reports each as active, unconfigured, broken or archived.
    """
    setup_logging(verbose)
    config = RegistryConfig.from_env(root, archive, claude_config)
    try:
        config.validate()
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)
    ctx.obj = {"config": config, "workers": workers}


# Register all subcommands
cli.add_command(list_command)
cli.add_command(info_command)
cli.add_command(config_snippet_command)
cli.add_command(build_command)
cli.add_command(summary_command)
cli.add_command(serve_command)
