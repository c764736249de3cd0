"""Tests for NpmBuildRunner process handling.

Uses the current interpreter as a stand-in build step so the tests do not
depend on npm being installed.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from mcp_tools_registry.build import NPM_BUILD_STEPS, NpmBuildRunner, ProcessFailure


class TestNpmBuildRunner:
    def test_default_steps_are_install_then_build(self) -> None:
        assert NpmBuildRunner().steps == [("npm", "install"), ("npm", "run", "build")]
        assert NPM_BUILD_STEPS[0] == ("npm", "install")

    def test_steps_run_in_tool_directory(self, tmp_path: Path) -> None:
        script = "import pathlib; pathlib.Path('built.txt').write_text('ok')"
        NpmBuildRunner(steps=[(sys.executable, "-c", script)]).run_build(tmp_path)
        assert (tmp_path / "built.txt").read_text() == "ok"

    def test_non_zero_exit_carries_stderr(self, tmp_path: Path) -> None:
        script = "import sys; sys.stderr.write('missing script: build'); sys.exit(1)"
        runner = NpmBuildRunner(steps=[(sys.executable, "-c", script)])
        with pytest.raises(ProcessFailure) as exc_info:
            runner.run_build(tmp_path)
        assert exc_info.value.output == "missing script: build"

    def test_stops_at_first_failure(self, tmp_path: Path) -> None:
        fail = "import sys; sys.exit(2)"
        touch = "import pathlib; pathlib.Path('second.txt').write_text('ran')"
        runner = NpmBuildRunner(steps=[(sys.executable, "-c", fail), (sys.executable, "-c", touch)])
        with pytest.raises(ProcessFailure):
            runner.run_build(tmp_path)
        assert not (tmp_path / "second.txt").exists()

    def test_missing_executable(self, tmp_path: Path) -> None:
        runner = NpmBuildRunner(steps=[("definitely-not-a-real-binary-xyz",)])
        with pytest.raises(ProcessFailure) as exc_info:
            runner.run_build(tmp_path)
        assert exc_info.value.command == ("definitely-not-a-real-binary-xyz",)

    def test_step_timeout(self, tmp_path: Path) -> None:
        runner = NpmBuildRunner(steps=[(sys.executable, "-c", "import time; time.sleep(10)")], timeout=0.5)
        with pytest.raises(ProcessFailure) as exc_info:
            runner.run_build(tmp_path)
        assert "timed out" in exc_info.value.output
