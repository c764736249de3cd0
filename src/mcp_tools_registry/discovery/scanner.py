"""Registry scan orchestration.

One scan takes a single snapshot of the Claude config, enumerates the tool
root and the archive root, and classifies every candidate against that
snapshot. Nothing is cached between scans.

Scan Algorithm:
    1. Read the membership snapshot. This completes before any
       classification starts and is never re-read mid-scan.
    2. Enumerate prefixed directories under the tool root, then under the
       archive root.
    3. Classify each candidate. Candidates share nothing mutable, so with
       ``max_workers > 1`` they are classified on a thread pool; results
       keep enumeration order either way.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from mcp_tools_registry.config import RegistryConfig
from mcp_tools_registry.discovery.capabilities import CapabilityDiscoverer
from mcp_tools_registry.discovery.classifier import ToolClassifier
from mcp_tools_registry.discovery.enumerator import DirectoryEnumerator
from mcp_tools_registry.discovery.membership import ConfigMembershipReader
from mcp_tools_registry.discovery.models import ScanResult, ToolRecord

logger = logging.getLogger(__name__)


class RegistryScanner:
    """Discovers and classifies every tool described by a ``RegistryConfig``.

    Usage::

        scanner = RegistryScanner(RegistryConfig.from_env())
        result = scanner.scan()
        for record in result.records:
            print(f"{record.identifier}: {record.status.value}")
    """

    def __init__(
        self,
        config: RegistryConfig,
        discoverer: CapabilityDiscoverer | None = None,
        max_workers: int = 1,
    ) -> None:
        self.config = config
        self.max_workers = max(1, max_workers)
        self.reader = ConfigMembershipReader(config.config_document_path)
        self.enumerator = DirectoryEnumerator(config.prefix)
        self.classifier = ToolClassifier(config, discoverer)

    def candidates(self) -> list[Path]:
        """List candidate directories: active root first, then archive."""
        if not self.config.candidate_root.is_dir():
            logger.warning("Tool root not found: %s", self.config.candidate_root)
        paths = list(self.enumerator.iter_candidates(self.config.candidate_root))
        for archived in self.enumerator.iter_candidates(self.config.archive_root):
            if archived not in paths:
                paths.append(archived)
        return paths

    def scan(self) -> ScanResult:
        """Run a full scan.

        Returns:
            A fresh ``ScanResult``. Unreadable directories are omitted.
        """
        membership = self.reader.read()
        paths = self.candidates()

        if self.max_workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                classified = list(pool.map(
                    lambda p: self.classifier.classify(p, membership), paths,
                ))
        else:
            classified = [self.classifier.classify(p, membership) for p in paths]

        records: list[ToolRecord] = [r for r in classified if r is not None]
        logger.debug(
            "Scanned %d candidates (%d classified, %d registered in config)",
            len(paths), len(records), len(membership),
        )
        return ScanResult(records=records, membership=membership, config=self.config)
