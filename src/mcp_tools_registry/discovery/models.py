"""Data models for the discovery module.

Contains the result types produced by ``RegistryScanner``: the per-tool
``ToolRecord`` and the aggregate ``ScanResult``. Records are created fresh
on every scan and never updated in place afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from mcp_tools_registry.config import RegistryConfig


class LifecycleStatus(str, Enum):
    """Lifecycle verdict for a tool. Exactly one applies per record.

    - ACTIVE: built and registered in the Claude config.
    - BROKEN: missing package.json, or registered but not built.
    - UNCONFIGURED: has a manifest but is not registered.
    - ARCHIVED: lives under the archive root.
    """

    ACTIVE = "active"
    BROKEN = "broken"
    UNCONFIGURED = "unconfigured"
    ARCHIVED = "archived"


@dataclass
class ToolRecord:
    """A single classified tool directory.

    Attributes:
        identifier: Directory base name (e.g., "mcp-reminders").
        short_identifier: ``identifier`` without the tool prefix, as used
            for Claude config lookups (e.g., "reminders").
        location: Absolute path to the tool directory.
        is_configured: Whether ``short_identifier`` was registered in the
            config snapshot taken at scan start.
        status: Lifecycle verdict.
        last_modified: Directory mtime at scan time (UTC).
        description: ``description`` from package.json, if any.
        version: ``version`` from package.json, if any.
        capabilities: Tool names found by best-effort source scanning.
            Only populated for active tools.
        diagnostic: Explanation for a broken status.
    """

    identifier: str
    short_identifier: str
    location: Path
    is_configured: bool
    status: LifecycleStatus
    last_modified: datetime
    description: str | None = None
    version: str | None = None
    capabilities: list[str] = field(default_factory=list)
    diagnostic: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Full detail view, omitting absent optional fields."""
        data: dict[str, Any] = {
            "name": self.identifier,
            "path": str(self.location),
            "description": self.description,
            "version": self.version,
            "configured": self.is_configured,
            "status": self.status.value,
            "tools": list(self.capabilities) if self.status is LifecycleStatus.ACTIVE else None,
            "lastModified": self.last_modified.isoformat(),
            "error": self.diagnostic,
        }
        return {key: value for key, value in data.items() if value is not None}

    def to_summary_dict(self) -> dict[str, Any]:
        """Condensed row for list output, omitting absent optional fields."""
        data: dict[str, Any] = {
            "name": self.identifier,
            "status": self.status.value,
            "configured": self.is_configured,
            "description": self.description,
            "version": self.version,
            "tools": len(self.capabilities),
            "error": self.diagnostic,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass
class ScanResult:
    """Complete result of one registry scan.

    Attributes:
        records: Classified tools, candidates first then archived, each in
            directory-name order.
        membership: Config snapshot the records were classified against.
        config: Configuration the scan ran with.
    """

    records: list[ToolRecord]
    membership: frozenset[str]
    config: RegistryConfig

    def by_status(self, status: LifecycleStatus | str) -> list[ToolRecord]:
        """Return records with the given status, or all for ``"all"``."""
        if status == "all":
            return list(self.records)
        wanted = LifecycleStatus(status)
        return [r for r in self.records if r.status is wanted]

    def find(self, name: str) -> ToolRecord | None:
        """Look up a record by identifier, with or without the prefix."""
        prefixed = f"{self.config.prefix}{name}"
        for record in self.records:
            if record.identifier == name or record.identifier == prefixed:
                return record
        return None
