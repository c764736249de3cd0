"""Reader for the set of MCP servers registered in the Claude config.

The Claude Desktop config is a JSON object whose ``mcpServers`` key maps
short server names to launch settings:

.. code-block:: json

    {
      "mcpServers": {
        "reminders": {
          "command": "node",
          "args": ["/Users/me/Code/mcp-reminders/dist/index.js"]
        }
      }
    }

Only the keys matter here. A missing or malformed config is a normal
condition (nothing is registered yet), so the reader returns an empty set
instead of raising.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

MCP_SERVERS_KEY = "mcpServers"


class ConfigMembershipReader:
    """Loads the registered server names from a Claude config document.

    Usage::

        reader = ConfigMembershipReader(Path("claude_desktop_config.json"))
        registered = reader.read()
        "reminders" in registered
    """

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path

    def read(self) -> frozenset[str]:
        """Return the short names registered under ``mcpServers``.

        Returns:
            Registered names. Empty if the document is missing, unreadable,
            not valid JSON, or lacks an ``mcpServers`` object.
        """
        try:
            raw_content = self.config_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Claude config not found: %s", self.config_path)
            return frozenset()
        except (OSError, UnicodeDecodeError):
            logger.warning("Unreadable Claude config: %s", self.config_path, exc_info=True)
            return frozenset()

        try:
            data = json.loads(raw_content)
        except json.JSONDecodeError:
            logger.warning("Invalid JSON in Claude config: %s", self.config_path)
            return frozenset()

        if not isinstance(data, dict):
            return frozenset()
        servers = data.get(MCP_SERVERS_KEY) or {}
        if not isinstance(servers, dict):
            logger.warning("Ignoring non-object %s in %s", MCP_SERVERS_KEY, self.config_path)
            return frozenset()
        return frozenset(servers.keys())
