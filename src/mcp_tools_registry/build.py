"""Build invocation for tool directories.

The registry only knows that a tool can be built in place. How that
happens is behind ``BuildRunner`` so the core never depends on a specific
process mechanism. ``NpmBuildRunner`` is the default: ``npm install``
followed by ``npm run build`` in the tool's root, synchronously, with no
retry.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

NPM_BUILD_STEPS: tuple[tuple[str, ...], ...] = (
    ("npm", "install"),
    ("npm", "run", "build"),
)


class ProcessFailure(Exception):
    """A build step could not be run or exited non-zero.

    Attributes:
        command: The command line that failed.
        output: Error text from the process (stderr, or the OS error).
    """

    def __init__(self, command: Sequence[str], output: str) -> None:
        super().__init__(output)
        self.command = tuple(command)
        self.output = output


class BuildRunner(ABC):
    """Builds a tool in its root directory."""

    @abstractmethod
    def run_build(self, root: Path) -> None:
        """Build the tool at ``root``.

        Raises:
            ProcessFailure: If any build step fails.
        """


class NpmBuildRunner(BuildRunner):
    """Runs ``npm install`` then ``npm run build``.

    Args:
        steps: Commands to run in order. Defaults to the npm pair.
        timeout: Optional per-step timeout in seconds.
    """

    def __init__(
        self,
        steps: Sequence[Sequence[str]] = NPM_BUILD_STEPS,
        timeout: float | None = None,
    ) -> None:
        self.steps = [tuple(step) for step in steps]
        self.timeout = timeout

    def run_build(self, root: Path) -> None:
        for step in self.steps:
            logger.info("Running %s in %s", " ".join(step), root)
            try:
                subprocess.run(
                    step,
                    cwd=root,
                    check=True,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                )
            except subprocess.CalledProcessError as exc:
                detail = (exc.stderr or exc.stdout or "").strip() or str(exc)
                raise ProcessFailure(step, detail) from exc
            except subprocess.TimeoutExpired as exc:
                raise ProcessFailure(step, str(exc)) from exc
            except OSError as exc:
                raise ProcessFailure(step, str(exc)) from exc
