"""
Dev loop — Tailwind watcher in the background, air in the foreground.

The watcher is an owned child: it runs in its own process group and
is terminated (group-wide) as soon as air exits or the user hits
Ctrl-C. air itself does all the file watching, rebuilding and
proxying; nothing here polls.
"""

from __future__ import annotations

import contextlib
import logging
import os
import signal
import subprocess
from collections.abc import Iterator
from pathlib import Path

from gotth.core.errors import StepFailedError
from gotth.core.models.project import ProjectSettings
from gotth.core.models.step import StepResult
from gotth.core.models.tool import ToolRef
from gotth.core.services.build_steps import tailwind_cmd

logger = logging.getLogger(__name__)

STOP_GRACE_SECONDS = 5
EXIT_INTERRUPTED = 130


def _spawn(cmd: list[str], cwd: Path, *, own_group: bool) -> subprocess.Popen:
    try:
        return subprocess.Popen(cmd, cwd=cwd, start_new_session=own_group)
    except OSError as e:
        raise StepFailedError(StepResult.failure(cmd[0], cmd, error=str(e)))


def stop_process(proc: subprocess.Popen, grace: float = STOP_GRACE_SECONDS) -> None:
    """Terminate *proc* and its process group; kill after *grace* seconds."""
    if proc.poll() is not None:
        return

    logger.debug("Stopping pid %d", proc.pid)
    _signal_group(proc, signal.SIGTERM)
    try:
        proc.wait(timeout=grace)
    except subprocess.TimeoutExpired:
        logger.warning("pid %d ignored SIGTERM, killing", proc.pid)
        _signal_group(proc, signal.SIGKILL if hasattr(signal, "SIGKILL") else signal.SIGTERM)
        proc.wait()


def stop_process_only(proc: subprocess.Popen, grace: float = STOP_GRACE_SECONDS) -> None:
    """Terminate a single process (not its group)."""
    if proc.poll() is not None:
        return
    proc.terminate()
    try:
        proc.wait(timeout=grace)
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.wait()


def _signal_group(proc: subprocess.Popen, sig: int) -> None:
    killpg = getattr(os, "killpg", None)
    try:
        if killpg is not None:
            killpg(proc.pid, sig)
        elif sig == signal.SIGTERM:
            proc.terminate()
        else:
            proc.kill()
    except ProcessLookupError:
        pass


@contextlib.contextmanager
def css_watcher(
    project_root: Path,
    settings: ProjectSettings,
    tools: dict[str, ToolRef],
) -> Iterator[subprocess.Popen]:
    """Run the Tailwind watcher for the duration of the block."""
    cmd = tailwind_cmd(tools, settings, watch=True)
    logger.info("Starting CSS watcher: %s", " ".join(cmd))
    proc = _spawn(cmd, project_root, own_group=True)
    try:
        yield proc
    finally:
        stop_process(proc)


def run_dev_loop(
    project_root: Path,
    settings: ProjectSettings,
    tools: dict[str, ToolRef],
) -> int:
    """Run the watcher and air until air exits.

    Returns:
        air's exit code, 128 + signal number when air was killed by a
        signal, or 130 when interrupted.
    """
    with css_watcher(project_root, settings, tools):
        air = _spawn([tools["air"].command], project_root, own_group=False)
        try:
            code = air.wait()
        except KeyboardInterrupt:
            # air shares our process group, so it got the SIGINT too.
            stop_process_only(air)
            return EXIT_INTERRUPTED
    logger.info("air exited with %d", code)
    return shell_exit_code(code)


def shell_exit_code(returncode: int) -> int:
    """Map a Popen return code to a process exit status (signal N -> 128+N)."""
    if returncode < 0:
        return 128 - returncode
    return returncode
