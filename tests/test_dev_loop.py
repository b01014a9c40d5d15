"""
Tests for the dev loop — owned watcher process, air in the foreground.
"""

import os
import signal
import subprocess
from pathlib import Path

import pytest

from gotth.core.errors import StepFailedError
from gotth.core.models.project import ProjectSettings
from gotth.core.models.tool import ToolRef
from gotth.core.services import dev_loop
from gotth.core.services.build_steps import tailwind_cmd


def _tools() -> dict[str, ToolRef]:
    return {
        tid: ToolRef(id=tid, label=tid, command=f"/usr/bin/{tid}", source="path")
        for tid in ("go", "bun", "templ", "air", "watchman")
    }


class FakeProc:
    """Minimal Popen stand-in."""

    _next_pid = 1000

    def __init__(self, cmd, exit_code=0, wait_exc=None, **kwargs):
        FakeProc._next_pid += 1
        self.pid = FakeProc._next_pid
        self.cmd = cmd
        self.kwargs = kwargs
        self.exit_code = exit_code
        self.wait_exc = wait_exc
        self.returncode = None
        self.terminated = False

    def poll(self):
        return self.returncode

    def wait(self, timeout=None):
        if self.wait_exc is not None:
            exc, self.wait_exc = self.wait_exc, None
            raise exc
        if self.returncode is None:
            self.returncode = self.exit_code
        return self.returncode

    def terminate(self):
        self.terminated = True
        self.returncode = -15

    def kill(self):
        self.returncode = -9


class PopenFactory:
    def __init__(self, air_exit=0, air_wait_exc=None):
        self.procs: list[FakeProc] = []
        self.air_exit = air_exit
        self.air_wait_exc = air_wait_exc

    def __call__(self, cmd, **kwargs):
        if cmd[0].endswith("air"):
            proc = FakeProc(cmd, exit_code=self.air_exit, wait_exc=self.air_wait_exc, **kwargs)
        else:
            # Watcher: never exits on its own.
            proc = FakeProc(cmd, exit_code=None, **kwargs)
        self.procs.append(proc)
        return proc


@pytest.fixture
def killed(monkeypatch):
    """Record os.killpg calls and mark the matching fake process dead."""
    calls: list[tuple[int, int]] = []
    monkeypatch.setattr(os, "killpg", lambda pid, sig: calls.append((pid, sig)), raising=False)
    return calls


class TestTailwindCmd:
    def test_watch(self, settings: ProjectSettings):
        assert tailwind_cmd(_tools(), settings, watch=True) == [
            "/usr/bin/bun", "x", "@tailwindcss/cli",
            "-i", "static/css/input.css",
            "-o", "static/css/styles.css",
            "--watch",
        ]

    def test_minify(self, settings: ProjectSettings):
        assert tailwind_cmd(_tools(), settings, minify=True)[-1] == "--minify"


class TestRunDevLoop:
    def test_starts_watcher_then_air(self, monkeypatch, killed, project: Path, settings):
        factory = PopenFactory(air_exit=0)
        monkeypatch.setattr(subprocess, "Popen", factory)

        # Watcher dies on SIGTERM.
        def fake_killpg(pid, sig):
            killed.append((pid, sig))
            for p in factory.procs:
                if p.pid == pid:
                    p.returncode = -sig

        monkeypatch.setattr(os, "killpg", fake_killpg, raising=False)

        code = dev_loop.run_dev_loop(project, settings, _tools())

        watcher, air = factory.procs
        assert code == 0
        assert "--watch" in watcher.cmd
        assert watcher.kwargs["start_new_session"] is True
        assert watcher.kwargs["cwd"] == project
        assert air.cmd == ["/usr/bin/air"]
        assert air.kwargs["start_new_session"] is False
        assert killed == [(watcher.pid, signal.SIGTERM)]

    def test_returns_air_exit_code(self, monkeypatch, killed, project: Path, settings):
        factory = PopenFactory(air_exit=3)
        monkeypatch.setattr(subprocess, "Popen", factory)

        assert dev_loop.run_dev_loop(project, settings, _tools()) == 3

        watcher, _air = factory.procs
        assert (watcher.pid, signal.SIGTERM) in killed

    def test_air_killed_by_signal(self, monkeypatch, killed, project: Path, settings):
        factory = PopenFactory(air_exit=-signal.SIGKILL)
        monkeypatch.setattr(subprocess, "Popen", factory)

        assert dev_loop.run_dev_loop(project, settings, _tools()) == 128 + signal.SIGKILL

        watcher, _air = factory.procs
        assert (watcher.pid, signal.SIGTERM) in killed

    def test_interrupt_stops_everything(self, monkeypatch, killed, project: Path, settings):
        factory = PopenFactory(air_wait_exc=KeyboardInterrupt())
        monkeypatch.setattr(subprocess, "Popen", factory)

        code = dev_loop.run_dev_loop(project, settings, _tools())

        watcher, air = factory.procs
        assert code == dev_loop.EXIT_INTERRUPTED
        assert air.terminated
        assert (watcher.pid, signal.SIGTERM) in killed

    def test_watcher_start_failure(self, monkeypatch, project: Path, settings):
        def boom(cmd, **kwargs):
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(subprocess, "Popen", boom)
        with pytest.raises(StepFailedError):
            dev_loop.run_dev_loop(project, settings, _tools())


class TestStopProcess:
    def test_already_exited(self, killed):
        proc = FakeProc(["x"])
        proc.returncode = 0
        dev_loop.stop_process(proc)
        assert killed == []

    def test_kills_after_grace(self, monkeypatch, killed):
        proc = FakeProc(["x"], exit_code=None)
        proc.wait_exc = subprocess.TimeoutExpired("x", 5)
        dev_loop.stop_process(proc, grace=0)
        assert [sig for _, sig in killed] == [signal.SIGTERM, signal.SIGKILL]


class TestShellExitCode:
    def test_plain_codes_pass_through(self):
        assert dev_loop.shell_exit_code(0) == 0
        assert dev_loop.shell_exit_code(2) == 2

    def test_signals_map_to_128_plus(self):
        assert dev_loop.shell_exit_code(-signal.SIGTERM) == 128 + signal.SIGTERM
