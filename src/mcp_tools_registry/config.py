"""Registry configuration: where to look for tools and their Claude config.

The scanner never reaches for fixed filesystem locations on its own. Every
root it touches comes from a ``RegistryConfig`` passed in at construction,
so tests can point it at synthetic directory trees.

Resolution order for each field (first match wins):
    1. Explicit value passed to ``RegistryConfig.from_env`` (CLI options).
    2. Environment variable (``MCP_REGISTRY_ROOT``, ``MCP_REGISTRY_ARCHIVE``,
       ``MCP_REGISTRY_CLAUDE_CONFIG``).
    3. Platform default.

Platform Notes:
    macOS keeps the Claude Desktop config under
    ``~/Library/Application Support/Claude/``. Windows uses ``%APPDATA%``.
    Linux uses ``~/.config/Claude/``.
"""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from mcp_tools_registry.exceptions import ConfigurationError

DEFAULT_PREFIX = "mcp-"
ARCHIVE_DIRNAME = "archived"
CLAUDE_CONFIG_FILENAME = "claude_desktop_config.json"

ENV_ROOT = "MCP_REGISTRY_ROOT"
ENV_ARCHIVE = "MCP_REGISTRY_ARCHIVE"
ENV_CLAUDE_CONFIG = "MCP_REGISTRY_CLAUDE_CONFIG"


def _current_platform() -> str:
    """Return the current platform identifier."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    return "windows" if system == "windows" else "linux"


def default_claude_config_path(
    home: Path | None = None,
    env: Mapping[str, str] | None = None,
    system: str | None = None,
) -> Path:
    """Return the Claude Desktop config location for a platform.

    Args:
        home: Override the home directory (for testing).
        env: Override the environment mapping (for testing).
        system: One of "macos", "windows", "linux". Defaults to the
            running platform.
    """
    home_dir = home if home is not None else Path.home()
    environ = env if env is not None else os.environ
    system = system or _current_platform()
    if system == "macos":
        base = home_dir / "Library" / "Application Support"
    elif system == "windows":
        appdata = environ.get("APPDATA")
        base = Path(appdata) if appdata else home_dir / "AppData" / "Roaming"
    else:
        xdg = environ.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else home_dir / ".config"
    return base / "Claude" / CLAUDE_CONFIG_FILENAME


@dataclass(frozen=True)
class RegistryConfig:
    """Filesystem locations consulted by a registry scan.

    Attributes:
        candidate_root: Directory whose ``prefix``-named children are tools.
        archive_root: Directory holding archived tools. Anything located
            under it is classified ``archived``.
        config_document_path: Claude Desktop config JSON file.
        prefix: Directory name prefix identifying a tool (``mcp-``).
    """

    candidate_root: Path
    archive_root: Path
    config_document_path: Path
    prefix: str = DEFAULT_PREFIX

    @classmethod
    def from_env(
        cls,
        candidate_root: Path | str | None = None,
        archive_root: Path | str | None = None,
        config_document_path: Path | str | None = None,
        *,
        env: Mapping[str, str] | None = None,
        home: Path | None = None,
    ) -> RegistryConfig:
        """Build a configuration from explicit values, env vars and defaults.

        Args:
            candidate_root: Explicit tool root, overrides ``MCP_REGISTRY_ROOT``.
            archive_root: Explicit archive root, overrides ``MCP_REGISTRY_ARCHIVE``.
            config_document_path: Explicit Claude config path, overrides
                ``MCP_REGISTRY_CLAUDE_CONFIG``.
            env: Override the environment mapping (for testing).
            home: Override the home directory (for testing).

        Returns:
            A ``RegistryConfig`` with absolute, user-expanded paths.
        """
        environ = env if env is not None else os.environ
        home_dir = home if home is not None else Path.home()

        root = candidate_root or environ.get(ENV_ROOT) or home_dir / "Code"
        root_path = _absolute(root)
        archive = archive_root or environ.get(ENV_ARCHIVE) or root_path / ARCHIVE_DIRNAME
        config_doc = (
            config_document_path
            or environ.get(ENV_CLAUDE_CONFIG)
            or default_claude_config_path(home=home_dir, env=environ)
        )
        return cls(
            candidate_root=root_path,
            archive_root=_absolute(archive),
            config_document_path=_absolute(config_doc),
        )

    def validate(self) -> None:
        """Reject configurations that can never produce a meaningful scan.

        Raises:
            ConfigurationError: If the prefix is empty or a root exists
                but is not a directory.
        """
        if not self.prefix:
            raise ConfigurationError("Tool prefix must not be empty")
        for label, root in (("Tool root", self.candidate_root),
                            ("Archive root", self.archive_root)):
            if root.exists() and not root.is_dir():
                raise ConfigurationError(f"{label} is not a directory: {root}")

    def is_archived(self, location: Path) -> bool:
        """Return True if ``location`` lies under the archive root."""
        location = _absolute(location)
        return location != self.archive_root and location.is_relative_to(self.archive_root)


def _absolute(value: Path | str) -> Path:
    """Absolute path with ``..`` and ``.`` segments collapsed."""
    return Path(os.path.normpath(Path(value).expanduser().absolute()))
