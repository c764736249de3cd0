"""Discovery and lifecycle classification of local MCP server projects.

Public API::

    from mcp_tools_registry.config import RegistryConfig
    from mcp_tools_registry.discovery import RegistryScanner

    scanner = RegistryScanner(RegistryConfig.from_env())
    result = scanner.scan()
    for record in result.by_status("broken"):
        print(f"{record.identifier}: {record.diagnostic}")
"""

from __future__ import annotations

from mcp_tools_registry.discovery.capabilities import (
    CapabilityDiscoverer,
    RegexCapabilityDiscoverer,
)
from mcp_tools_registry.discovery.classifier import ToolClassifier
from mcp_tools_registry.discovery.enumerator import DirectoryEnumerator
from mcp_tools_registry.discovery.membership import ConfigMembershipReader
from mcp_tools_registry.discovery.models import LifecycleStatus, ScanResult, ToolRecord
from mcp_tools_registry.discovery.scanner import RegistryScanner

__all__ = [
    "CapabilityDiscoverer",
    "ConfigMembershipReader",
    "DirectoryEnumerator",
    "LifecycleStatus",
    "RegexCapabilityDiscoverer",
    "RegistryScanner",
    "ScanResult",
    "ToolClassifier",
    "ToolRecord",
]
