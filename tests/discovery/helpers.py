"""Shared test helpers for creating fake tool directories.

Each helper builds a minimal but realistic MCP server checkout: a
``package.json`` manifest, an optional build output and an optional
``src/index.ts`` with tool declarations. Used across the discovery, CLI,
registry and server tests.
"""

from __future__ import annotations

import json
from pathlib import Path

_NOT_SET = object()

SAMPLE_SOURCE = """\
import { Server } from "@modelcontextprotocol/sdk/server/index.js";

const server = new Server({ name: "mcp-reminders", version: "1.0.0" });

const TOOLS = [
  { name: "reminders_list", description: "List reminders" },
  { name: 'reminders_add', description: "Add a reminder" },
];
"""


def create_tool(
    root: Path,
    name: str,
    *,
    manifest: object = _NOT_SET,
    built: bool = True,
    source: str | None = None,
) -> Path:
    """Create a tool directory under ``root``.

    Args:
        root: Parent directory (tool root or archive root).
        name: Directory name, e.g. "mcp-reminders".
        manifest: package.json content. A dict/list is JSON-encoded, a
            str is written verbatim, None skips the file. Defaults to a
            manifest with ``main: dist/index.js``.
        built: Whether to create the manifest's entry point.
        source: Optional ``src/index.ts`` content.

    Returns:
        The created tool directory.
    """
    tool_dir = root / name
    tool_dir.mkdir(parents=True, exist_ok=True)

    if manifest is _NOT_SET:
        manifest = {
            "name": name,
            "version": "1.0.0",
            "description": f"{name} server",
            "main": "dist/index.js",
        }
    if isinstance(manifest, (dict, list)):
        (tool_dir / "package.json").write_text(json.dumps(manifest))
    elif isinstance(manifest, str):
        (tool_dir / "package.json").write_text(manifest)

    if built:
        entry = "index.js"
        if isinstance(manifest, dict) and isinstance(manifest.get("main"), str) and manifest["main"]:
            entry = manifest["main"]
        entry_path = tool_dir / entry
        entry_path.parent.mkdir(parents=True, exist_ok=True)
        entry_path.write_text("// built\n")

    if source is not None:
        src = tool_dir / "src"
        src.mkdir(exist_ok=True)
        (src / "index.ts").write_text(source)
    return tool_dir


def write_claude_config(path: Path, names: list[str] | None = None, raw: str | None = None) -> Path:
    """Write a Claude Desktop config registering ``names``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if raw is not None:
        path.write_text(raw)
        return path
    servers = {
        name: {"command": "node", "args": [f"/tmp/mcp-{name}/dist/index.js"]}
        for name in names or []
    }
    path.write_text(json.dumps({"mcpServers": servers}))
    return path
