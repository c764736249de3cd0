"""Enumerates candidate tool directories under a root."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


class DirectoryEnumerator:
    """Yields the immediate child directories whose names carry a prefix.

    Children are yielded in name order. A missing or unreadable root
    yields nothing; entries that cannot be inspected are skipped.
    """

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def iter_candidates(self, root: Path) -> Iterator[Path]:
        """Yield prefixed child directories of ``root``."""
        try:
            entries = sorted(root.iterdir())
        except FileNotFoundError:
            logger.debug("Root does not exist: %s", root)
            return
        except (PermissionError, OSError):
            logger.warning("Cannot list directory: %s", root)
            return

        for entry in entries:
            if not entry.name.startswith(self.prefix):
                continue
            try:
                if not entry.is_dir():
                    continue
            except (PermissionError, OSError):
                continue
            yield entry
