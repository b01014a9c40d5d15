"""
Shared test fixtures and configuration.

No test runs a real external command: ``shutil.which`` and the step
runner are replaced by the fixtures below.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest

from gotth.core.errors import StepFailedError
from gotth.core.models.project import ProjectSettings
from gotth.core.models.step import StepResult
from gotth.core.services import runner

ALL_TOOLS = ("go", "bun", "templ", "air", "watchman")


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """An empty home directory, with Go path variables cleared."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("GOPATH", raising=False)
    monkeypatch.delenv("GOBIN", raising=False)
    return home_dir


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """An empty project directory named 'demo'."""
    root = tmp_path / "demo"
    root.mkdir()
    return root


@pytest.fixture
def settings() -> ProjectSettings:
    return ProjectSettings(name="demo")


@pytest.fixture
def on_path(monkeypatch):
    """Declare which executables ``shutil.which`` can see.

    Usage: ``on_path("go", "bun")``. Returns the mutable set so tests
    can add tools mid-flight (e.g. after a simulated install).
    """
    present: set[str] = set()

    def fake_which(name, *args, **kwargs):
        return f"/usr/bin/{name}" if name in present else None

    monkeypatch.setattr(shutil, "which", fake_which)

    def declare(*names: str) -> set[str]:
        present.update(names)
        return present

    return declare


class StepRecorder:
    """Stand-in for ``runner.run_step`` that records instead of running."""

    def __init__(self):
        self.calls: list[dict] = []
        self.fail_on: set[str] = set()
        self.side_effects: dict[str, Callable[[], None]] = {}

    @property
    def names(self) -> list[str]:
        return [c["name"] for c in self.calls]

    @property
    def commands(self) -> list[list[str]]:
        return [c["cmd"] for c in self.calls]

    def __call__(self, name, cmd, *, cwd=None, needs_sudo=False):
        self.calls.append({
            "name": name,
            "cmd": list(cmd),
            "cwd": cwd,
            "needs_sudo": needs_sudo,
        })
        if name in self.side_effects:
            self.side_effects[name]()
        if name in self.fail_on:
            raise StepFailedError(StepResult.failure(
                name, list(cmd), error="Command failed (exit 1)", return_code=1,
            ))
        return StepResult.success(name, list(cmd), return_code=0)


@pytest.fixture
def steps(monkeypatch) -> StepRecorder:
    recorder = StepRecorder()
    monkeypatch.setattr(runner, "run_step", recorder)
    return recorder
