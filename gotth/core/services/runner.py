"""
Step runner — the SINGLE PLACE where blocking external commands run.

Every build, generate, and install step goes through run_step().
Child processes inherit the terminal so their output (and any sudo
password prompt) reaches the user directly. There are no timeouts:
a step blocks until the command exits.

A non-zero exit is never returned; it is raised as StepFailedError
so that the first failure halts whatever sequence is running.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from pathlib import Path

from gotth.core.errors import StepFailedError
from gotth.core.models.step import StepResult

logger = logging.getLogger(__name__)


def _is_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def with_sudo(cmd: list[str]) -> list[str]:
    """Prefix *cmd* with sudo unless we already run as root."""
    if _is_root():
        return list(cmd)
    return ["sudo", *cmd]


def run_step(
    name: str,
    cmd: list[str],
    *,
    cwd: Path | None = None,
    needs_sudo: bool = False,
) -> StepResult:
    """Run one blocking step and return its result.

    Args:
        name: Short label for logs and error messages.
        cmd: Command list for ``subprocess.run()``.
        cwd: Working directory (default: current directory).
        needs_sudo: Prefix the command with ``sudo`` when not root.

    Raises:
        StepFailedError: The command could not start or exited non-zero.
    """
    if needs_sudo:
        cmd = with_sudo(cmd)

    logger.info("%s: %s", name, " ".join(cmd))
    start = time.monotonic()
    try:
        result = subprocess.run(cmd, cwd=cwd, check=False)
    except FileNotFoundError:
        raise StepFailedError(StepResult.failure(
            name, cmd, error=f"command not found: {cmd[0]}",
        ))
    except OSError as e:
        raise StepFailedError(StepResult.failure(name, cmd, error=str(e)))

    elapsed_ms = int((time.monotonic() - start) * 1000)
    if result.returncode != 0:
        logger.debug("%s exited %d after %dms", name, result.returncode, elapsed_ms)
        raise StepFailedError(StepResult.failure(
            name,
            cmd,
            error=f"Command failed (exit {result.returncode})",
            return_code=result.returncode,
            duration_ms=elapsed_ms,
        ))

    return StepResult.success(
        name, cmd, return_code=0, duration_ms=elapsed_ms,
    )
