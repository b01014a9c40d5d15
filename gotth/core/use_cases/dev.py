"""
Dev use case — prepare the project, then hand over to the dev loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gotth.core.interaction import Confirm, Notify, deny, log_notify
from gotth.core.models.project import ProjectSettings
from gotth.core.models.step import StepResult
from gotth.core.models.tool import ToolRef
from gotth.core.services.dev_loop import run_dev_loop
from gotth.core.services.generators.air_config import ensure_air_config
from gotth.core.services.go_module import has_go_module, setup_go_module
from gotth.core.services.tool_install import ensure_tailwind
from gotth.core.use_cases.deps import check_deps


@dataclass
class DevPreparation:
    tools: dict[str, ToolRef]
    steps: list[StepResult] = field(default_factory=list)
    air_config_written: bool = False


def prepare_dev(
    project_root: Path,
    settings: ProjectSettings,
    confirm: Confirm = deny,
    notify: Notify = log_notify,
    tools: dict[str, ToolRef] | None = None,
    home: Path | None = None,
) -> DevPreparation:
    """Everything ``dev`` needs before launching processes.

    Order: dependencies, Tailwind, .air.toml, go.mod.

    Raises:
        GotthError: On the first failing step.
    """
    tools = check_deps(confirm=confirm, notify=notify, tools=tools, home=home)
    prep = DevPreparation(tools=tools)

    tailwind = ensure_tailwind(project_root, tools)
    if tailwind.ok:
        notify("Tailwind installed", "done")
    prep.steps.append(tailwind)

    prep.air_config_written = ensure_air_config(project_root, settings)
    if prep.air_config_written:
        notify(".air.toml configured", "done")

    if not has_go_module(project_root):
        notify("Initializing Go Module", "section")
        prep.steps.extend(setup_go_module(project_root, settings, tools))
        notify("Go module initialized", "done")

    return prep


def run_dev(
    project_root: Path,
    settings: ProjectSettings,
    confirm: Confirm = deny,
    notify: Notify = log_notify,
    tools: dict[str, ToolRef] | None = None,
    home: Path | None = None,
) -> int:
    """Prepare, then run the watcher + air loop.

    Returns:
        The dev loop's exit code.
    """
    prep = prepare_dev(
        project_root, settings, confirm=confirm, notify=notify, tools=tools, home=home,
    )
    notify("Starting Dev Server...", "section")
    return run_dev_loop(project_root, settings, prep.tools)
