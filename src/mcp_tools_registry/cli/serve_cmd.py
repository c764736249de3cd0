"""``mcp-registry serve`` — Run the registry as an MCP server on stdio."""

from __future__ import annotations

import click


@click.command("serve")
@click.pass_obj
def serve_command(obj: dict) -> None:
    """Serve the registry tools to an MCP client over stdio.

    Exposes registry_list, registry_info, registry_config_snippet,
    registry_build, registry_summary and registry_help.
    """
    from mcp_tools_registry.server import create_server

    server = create_server(obj["config"], max_workers=obj["workers"])
    server.run()
