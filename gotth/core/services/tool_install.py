"""
Dependency installer — make sure every required tool is present.

Missing tools are offered for installation one at a time. The caller
supplies the ``confirm`` prompt (the CLI uses a yes/no prompt that
defaults to "no") and a ``notify`` sink for progress lines. Anything
other than an explicit yes is fatal, as is any failed install command.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gotth.core.errors import (
    InstallDeclinedError,
    MissingToolError,
    UnsupportedEnvironmentError,
)
from gotth.core.interaction import Confirm, Notify, deny, log_notify
from gotth.core.models.step import StepResult
from gotth.core.models.tool import ToolRef, ToolSpec
from gotth.core.services import runner
from gotth.core.services.tool_recipes import (
    PACKAGE_MANAGERS,
    TOOL_RECIPES,
    build_pkg_install_cmds,
    pm_needs_sudo,
)
from gotth.core.services.tool_resolver import (
    detect_package_manager,
    detect_shell_config,
    resolve_tool,
)

logger = logging.getLogger(__name__)

TAILWIND_PACKAGES = ("tailwindcss", "@tailwindcss/cli")


def ensure_dependencies(
    tools: dict[str, ToolRef],
    confirm: Confirm = deny,
    notify: Notify = log_notify,
    home: Path | None = None,
) -> dict[str, ToolRef]:
    """Check every catalog tool and install the missing ones on request.

    Args:
        tools: Output of ``resolve_tools()``.
        confirm: Yes/no prompt. Must return True only on explicit consent.
        notify: Receives human-readable progress lines.
        home: Home directory override (tests).

    Returns:
        A new tool mapping with freshly installed tools re-resolved.

    Raises:
        MissingToolError: Go is not installed.
        InstallDeclinedError: The user declined a required install.
        UnsupportedEnvironmentError: No package manager for a system dep.
        StepFailedError: An install command failed.
    """
    resolved = dict(tools)

    for tid, spec in TOOL_RECIPES.items():
        ref = resolved.get(tid)
        if ref is not None and ref.found:
            logger.debug("%s found at %s", spec.label, ref.command)
            continue

        if spec.install_kind == "none":
            raise MissingToolError(tid, spec.required_msg or f"{spec.label} not found")

        if not confirm(_install_prompt(spec)):
            raise InstallDeclinedError(tid, spec.required_msg)

        notify(f"Installing {spec.label}...")
        _install(spec, resolved, notify, home)
        resolved[tid] = resolve_tool(spec, home)

    return resolved


def _install_prompt(spec: ToolSpec) -> str:
    note = f" ({spec.purpose})" if spec.purpose else ""
    return f"{spec.label} not found{note}. Install it?"


def _install(
    spec: ToolSpec,
    resolved: dict[str, ToolRef],
    notify: Notify,
    home: Path | None,
) -> None:
    if spec.install_kind == "script":
        runner.run_step(f"install {spec.id}", spec.install_cmd)
        shell_config = detect_shell_config(home)
        notify(f"Detected Shell Config: ~/{shell_config}")
        notify(f"NOTE: Enabled {spec.label} for this run. Run 'source ~/{shell_config}' later.")
        return

    if spec.install_kind == "go":
        go = resolved["go"].command
        runner.run_step(f"install {spec.id}", [go, *spec.install_cmd])
        return

    if spec.install_kind == "system":
        install_system_package(spec.package or spec.cli)
        return

    raise MissingToolError(spec.id, spec.required_msg)


def install_system_package(package: str) -> list[StepResult]:
    """Install *package* with the first package manager found on PATH.

    Raises:
        UnsupportedEnvironmentError: None of PACKAGE_MANAGERS is available.
        StepFailedError: The package manager failed.
    """
    pm = detect_package_manager()
    if pm is None:
        raise UnsupportedEnvironmentError(
            f"Could not detect package manager ({'/'.join(PACKAGE_MANAGERS)}). "
            f"Please install '{package}' manually."
        )

    logger.info("Installing %s with %s", package, pm)
    return [
        runner.run_step(f"{pm} {package}", cmd, needs_sudo=pm_needs_sudo(pm))
        for cmd in build_pkg_install_cmds(package, pm)
    ]


def tailwind_installed(project_root: Path) -> bool:
    """Whether the Tailwind v4 CLI is present in node_modules."""
    return (project_root / "node_modules" / "@tailwindcss" / "cli").is_dir()


def install_tailwind(project_root: Path, tools: dict[str, ToolRef]) -> StepResult:
    """Add Tailwind and its CLI as dev dependencies via Bun."""
    return runner.run_step(
        "tailwind install",
        [tools["bun"].command, "add", "-d", *TAILWIND_PACKAGES],
        cwd=project_root,
    )


def ensure_tailwind(project_root: Path, tools: dict[str, ToolRef]) -> StepResult:
    """Install Tailwind only when its CLI is missing."""
    if tailwind_installed(project_root):
        return StepResult.skip("tailwind install", reason="already installed")
    return install_tailwind(project_root, tools)
