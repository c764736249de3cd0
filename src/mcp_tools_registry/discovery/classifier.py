"""Lifecycle classification for a single tool directory.

Turns filesystem and config evidence into exactly one ``LifecycleStatus``.

Classification Algorithm (first match wins):
    1. Stat the directory. If that fails the directory is skipped
       (``classify`` returns None).
    2. Archived: the directory lies under the archive root. Terminal; no
       manifest or build inspection happens.
    3. Manifest: ``package.json`` must be a readable JSON object, else
       BROKEN with "Missing or invalid package.json".
    4. Build output: the manifest's ``main`` (default ``index.js``) must
       exist. The outcome depends on registration:

       =========  ==========  =============================
       built      configured  status
       =========  ==========  =============================
       yes        yes         ACTIVE
       yes        no          UNCONFIGURED
       no         yes         BROKEN ("Not built (...)")
       no         no          UNCONFIGURED, no diagnostic
       =========  ==========  =============================

    5. Active tools get a capability list from the ``CapabilityDiscoverer``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from mcp_tools_registry.config import RegistryConfig
from mcp_tools_registry.discovery.capabilities import (
    CapabilityDiscoverer,
    RegexCapabilityDiscoverer,
)
from mcp_tools_registry.discovery.models import LifecycleStatus, ToolRecord

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
DEFAULT_ENTRY_POINT = "index.js"
INVALID_MANIFEST = "Missing or invalid package.json"


def _load_manifest(location: Path) -> dict[str, Any] | None:
    """Read and parse ``package.json``. None if missing or not an object."""
    try:
        data = json.loads((location / MANIFEST_FILENAME).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _optional_str(manifest: dict[str, Any], key: str) -> str | None:
    value = manifest.get(key)
    return value if isinstance(value, str) else None


class ToolClassifier:
    """Classifies tool directories against a config membership snapshot.

    Usage::

        classifier = ToolClassifier(config)
        record = classifier.classify(Path("/code/mcp-reminders"), {"reminders"})
        if record is not None:
            print(record.status)
    """

    def __init__(
        self,
        config: RegistryConfig,
        discoverer: CapabilityDiscoverer | None = None,
    ) -> None:
        self.config = config
        self.discoverer = discoverer or RegexCapabilityDiscoverer(
            exclude_token=config.prefix,
        )

    def short_identifier(self, identifier: str) -> str:
        """Strip the first occurrence of the tool prefix."""
        return identifier.replace(self.config.prefix, "", 1)

    def classify(self, path: Path, membership: frozenset[str]) -> ToolRecord | None:
        """Produce the record for one candidate directory.

        Args:
            path: Candidate tool directory.
            membership: Short names registered in the Claude config.

        Returns:
            The classified record, or None if the directory could not be
            stat'ed.
        """
        location = path.absolute()
        identifier = location.name
        short_identifier = self.short_identifier(identifier)

        try:
            stats = location.stat()
        except OSError:
            logger.debug("Skipping unreadable tool directory: %s", location)
            return None

        record = ToolRecord(
            identifier=identifier,
            short_identifier=short_identifier,
            location=location,
            is_configured=short_identifier in membership,
            status=LifecycleStatus.UNCONFIGURED,
            last_modified=datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc),
        )

        if self.config.is_archived(location):
            record.status = LifecycleStatus.ARCHIVED
            return record

        manifest = _load_manifest(location)
        if manifest is None:
            record.status = LifecycleStatus.BROKEN
            record.diagnostic = INVALID_MANIFEST
            return record
        record.description = _optional_str(manifest, "description")
        record.version = _optional_str(manifest, "version")

        entry_point = _optional_str(manifest, "main") or DEFAULT_ENTRY_POINT
        # Entry points resolve inside the tool even when written as "/dist/index.js".
        built = (location / entry_point.lstrip("/")).exists()
        if built:
            record.status = (
                LifecycleStatus.ACTIVE if record.is_configured
                else LifecycleStatus.UNCONFIGURED
            )
        elif record.is_configured:
            record.status = LifecycleStatus.BROKEN
            record.diagnostic = f"Not built (missing {entry_point})"

        if record.status is LifecycleStatus.ACTIVE:
            record.capabilities = self._discover_capabilities(location)
        return record

    def _discover_capabilities(self, location: Path) -> list[str]:
        try:
            return list(self.discoverer.discover(location))
        except Exception:
            logger.warning("Capability discovery failed: %s", location, exc_info=True)
            return []
