"""
Tool resolver — map each required tool to the command string to invoke.

Resolution order per tool:
    1. ``shutil.which`` on PATH
    2. a fixed user-local install location (Bun, go-installed binaries)
    3. the bare executable name, left for the OS to fail on at run time

Read-only: nothing here installs or writes anything.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from gotth.core.models.tool import ToolRef, ToolSpec
from gotth.core.services.tool_recipes import PACKAGE_MANAGERS, TOOL_RECIPES

logger = logging.getLogger(__name__)

# Checked in order; ".profile" is the fallback when none exist.
_SHELL_CONFIGS = (".zshrc", ".bash_profile", ".bashrc")


def go_bin_dir(home: Path) -> Path:
    """Directory that ``go install`` writes binaries to."""
    gobin = os.environ.get("GOBIN")
    if gobin:
        return Path(gobin)
    gopath = os.environ.get("GOPATH")
    if gopath:
        return Path(gopath.split(os.pathsep)[0]) / "bin"
    return home / "go" / "bin"


def fallback_path(spec: ToolSpec, home: Path) -> Path | None:
    """The predictable user-local install path for *spec*, if any."""
    if spec.fallback:
        return home / spec.fallback
    if spec.go_bin:
        return go_bin_dir(home) / spec.cli
    return None


def resolve_tool(spec: ToolSpec, home: Path | None = None) -> ToolRef:
    """Resolve a single tool."""
    home = home or Path.home()

    found = shutil.which(spec.cli)
    if found:
        return ToolRef(id=spec.id, label=spec.label, command=found, source="path")

    candidate = fallback_path(spec, home)
    if candidate is not None and candidate.is_file():
        logger.debug("%s not on PATH, using %s", spec.cli, candidate)
        return ToolRef(
            id=spec.id, label=spec.label, command=str(candidate), source="fallback",
        )

    return ToolRef(id=spec.id, label=spec.label, command=spec.cli, source="bare")


def resolve_tools(home: Path | None = None) -> dict[str, ToolRef]:
    """Resolve every tool in the catalog.

    Returns:
        Mapping of tool id to ToolRef, in catalog order.
    """
    tools = {tid: resolve_tool(spec, home) for tid, spec in TOOL_RECIPES.items()}
    logger.debug(
        "Resolved tools: %s",
        ", ".join(f"{t.id}={t.command}" for t in tools.values()),
    )
    return tools


def detect_shell_config(home: Path | None = None) -> str:
    """Name of the shell profile the user should source after installs."""
    home = home or Path.home()
    for name in _SHELL_CONFIGS:
        if (home / name).is_file():
            return name
    return ".profile"


def detect_package_manager() -> str | None:
    """First supported package manager found on PATH, or None."""
    for pm in PACKAGE_MANAGERS:
        if shutil.which(pm):
            return pm
    return None
