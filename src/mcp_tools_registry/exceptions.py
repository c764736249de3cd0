"""MCP Tools Registry exception hierarchy.

All public exceptions inherit from RegistryError, giving callers a single
base class to catch when they want to handle any registry failure without
swallowing unrelated errors.

Conditions the registry absorbs (an unreadable tool directory, a missing
Claude config, a malformed package.json) never raise. Only the failures a
caller has to act on are surfaced here.
"""

from __future__ import annotations


class RegistryError(Exception):
    """Base exception for all registry errors."""


class ConfigurationError(RegistryError):
    """Raised when an explicitly supplied registry configuration is invalid.

    Covers roots that exist but are not directories and empty tool
    prefixes. A root that simply does not exist is not an error.
    """


class ToolNotFoundError(RegistryError):
    """Raised when a requested tool is not present in the current scan."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Tool {name} not found")
        self.name = name


class BuildError(RegistryError):
    """Raised when building a tool fails.

    Attributes:
        identifier: Directory name of the tool that failed to build.
        output: Error text captured from the underlying process.
    """

    def __init__(self, identifier: str, output: str) -> None:
        super().__init__(f"Failed to build {identifier}: {output}")
        self.identifier = identifier
        self.output = output
