"""High-level registry operations over a fresh scan.

Every operation runs its own scan, so results always reflect the disk and
the Claude config as they are at call time.

Operations:
    list_tools      — Records filtered by status, sorted by name.
    get_tool        — One record by name (with or without ``mcp-``).
    config_snippet  — ``mcpServers`` fragment to register a tool.
    build_tool      — Install dependencies and build a tool.
    summary         — Counts and names per status.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp_tools_registry.build import BuildRunner, NpmBuildRunner, ProcessFailure
from mcp_tools_registry.config import RegistryConfig
from mcp_tools_registry.discovery import (
    CapabilityDiscoverer,
    LifecycleStatus,
    RegistryScanner,
    ScanResult,
    ToolRecord,
)
from mcp_tools_registry.exceptions import BuildError, ToolNotFoundError

logger = logging.getLogger(__name__)

STATUS_FILTERS = ("all",) + tuple(s.value for s in LifecycleStatus)

# Launch settings written into generated config snippets.
SNIPPET_COMMAND = "node"
SNIPPET_ENTRY = ("dist", "index.js")


class ToolRegistry:
    """Facade over scanning, lookup, config generation and builds.

    Usage::

        registry = ToolRegistry(RegistryConfig.from_env())
        for record in registry.list_tools("unconfigured"):
            print(registry.config_snippet(record.identifier))
    """

    def __init__(
        self,
        config: RegistryConfig,
        build_runner: BuildRunner | None = None,
        discoverer: CapabilityDiscoverer | None = None,
        max_workers: int = 1,
    ) -> None:
        self.config = config
        self.build_runner = build_runner or NpmBuildRunner()
        self.scanner = RegistryScanner(config, discoverer=discoverer, max_workers=max_workers)

    def scan(self) -> ScanResult:
        return self.scanner.scan()

    def list_tools(self, status: str = "all") -> list[ToolRecord]:
        """Return scanned records, optionally filtered, sorted by identifier.

        Raises:
            ValueError: If ``status`` is not "all" or a lifecycle status.
        """
        if status not in STATUS_FILTERS:
            raise ValueError(f"Unknown status filter: {status}")
        records = self.scan().by_status(status)
        return sorted(records, key=lambda r: r.identifier)

    def get_tool(self, name: str) -> ToolRecord:
        """Find a tool by identifier or short identifier.

        Raises:
            ToolNotFoundError: If no scanned tool matches.
        """
        record = self.scan().find(name)
        if record is None:
            raise ToolNotFoundError(name)
        return record

    def config_snippet(self, name: str) -> str:
        """Render the ``mcpServers`` entry that registers a tool.

        Returns:
            JSON text of ``{short_name: {"command": ..., "args": [...]}}``.

        Raises:
            ToolNotFoundError: If no scanned tool matches.
        """
        record = self.get_tool(name)
        entry = record.location.joinpath(*SNIPPET_ENTRY)
        snippet = {
            record.short_identifier: {
                "command": SNIPPET_COMMAND,
                "args": [str(entry)],
            },
        }
        return json.dumps(snippet, indent=2)

    def build_tool(self, name: str) -> str:
        """Install dependencies and build a tool in place.

        Returns:
            A success message naming the tool.

        Raises:
            ToolNotFoundError: If no scanned tool matches.
            BuildError: If the build process fails. Not retried.
        """
        record = self.get_tool(name)
        try:
            self.build_runner.run_build(record.location)
        except ProcessFailure as exc:
            logger.warning("Build failed for %s: %s", record.identifier, exc.output)
            raise BuildError(record.identifier, exc.output) from exc
        return f"Successfully built {record.identifier}"

    def summary(self) -> dict[str, Any]:
        """Aggregate counts by status plus per-status name lists."""
        records = self.scan().records

        def named(status: LifecycleStatus) -> list[str]:
            return [r.identifier for r in records if r.status is status]

        counts: dict[str, int] = {"total": len(records)}
        for status in LifecycleStatus:
            counts[status.value] = sum(1 for r in records if r.status is status)
        counts["configured"] = sum(1 for r in records if r.is_configured)

        details = {
            "active": named(LifecycleStatus.ACTIVE),
            "broken": [
                {"name": r.identifier, "error": r.diagnostic}
                for r in records if r.status is LifecycleStatus.BROKEN
            ],
            "unconfigured": named(LifecycleStatus.UNCONFIGURED),
            "archived": named(LifecycleStatus.ARCHIVED),
        }
        return {"summary": counts, "details": details}
