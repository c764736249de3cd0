"""MCP Tools Registry: inventory and lifecycle status for local MCP servers."""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"
