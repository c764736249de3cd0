"""Best-effort discovery of the tools an MCP server exposes.

This is a HEURISTIC. The server is never executed; instead its
conventional TypeScript entry (``src/index.ts``) is scanned for
``name: "..."`` declarations, which is how MCP tool definitions are
usually written:

.. code-block:: typescript

    const TOOLS = [
      { name: "reminders_list", description: "...", inputSchema: {...} },
    ];

The scan over-reports (any ``name:`` property matches) and under-reports
(tools registered dynamically are invisible). Matches containing the
tool prefix are dropped, which removes the server's own ``name:
"mcp-..."`` declaration but is not an exhaustive filter.

A stricter implementation can be substituted by subclassing
``CapabilityDiscoverer`` and passing it to ``ToolClassifier``.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

_NAME_DECLARATION = re.compile(r"""name:\s*["']([^"']+)["']""")

DEFAULT_SOURCE = Path("src") / "index.ts"


class CapabilityDiscoverer(ABC):
    """Interface for listing the tools a server directory provides."""

    @abstractmethod
    def discover(self, location: Path) -> list[str]:
        """Return tool names declared by the server at ``location``.

        Must not raise on missing or unreadable sources; return an empty
        list instead.
        """


class RegexCapabilityDiscoverer(CapabilityDiscoverer):
    """Scans a single source file for ``name: "..."`` declarations.

    Args:
        source: Source file path relative to the tool directory.
        exclude_token: Matches containing this substring are dropped.
    """

    def __init__(self, source: Path = DEFAULT_SOURCE, exclude_token: str = "mcp-") -> None:
        self.source = source
        self.exclude_token = exclude_token

    def discover(self, location: Path) -> list[str]:
        source_path = location / self.source
        try:
            content = source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.debug("No readable source at %s", source_path)
            return []
        return [
            name
            for name in _NAME_DECLARATION.findall(content)
            if self.exclude_token not in name
        ]
