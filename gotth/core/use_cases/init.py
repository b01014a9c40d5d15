"""
Init use case — bootstrap a new project end to end.

Sequence: dependencies, skeleton, Go module, Tailwind, Alpine.js,
.air.toml. The first failure aborts the rest; whatever was already
created stays on disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gotth.core.interaction import Confirm, Notify, deny, log_notify
from gotth.core.models.project import ProjectSettings
from gotth.core.models.step import StepResult
from gotth.core.models.tool import ToolRef
from gotth.core.services.assets import download_alpine
from gotth.core.services.generators.air_config import ensure_air_config
from gotth.core.services.go_module import setup_go_module
from gotth.core.services.scaffold import create_dirs, write_css_input
from gotth.core.services.tool_install import install_tailwind
from gotth.core.use_cases.deps import check_deps


@dataclass
class InitResult:
    """Everything an init run produced."""

    project_name: str
    created: list[str] = field(default_factory=list)
    steps: list[StepResult] = field(default_factory=list)
    tools: dict[str, ToolRef] = field(default_factory=dict)
    air_config_written: bool = False

    def to_dict(self) -> dict:
        return {
            "project": self.project_name,
            "created": self.created,
            "steps": [s.model_dump() for s in self.steps],
            "tools": {tid: t.to_dict() for tid, t in self.tools.items()},
            "air_config_written": self.air_config_written,
        }


def run_init(
    project_root: Path,
    settings: ProjectSettings,
    confirm: Confirm = deny,
    notify: Notify = log_notify,
    tools: dict[str, ToolRef] | None = None,
    skip_assets: bool = False,
    home: Path | None = None,
) -> InitResult:
    """Bootstrap the project at *project_root*.

    Raises:
        GotthError: On the first failing step.
    """
    result = InitResult(project_name=settings.name)

    result.tools = check_deps(confirm=confirm, notify=notify, tools=tools, home=home)

    notify("Creating project structure", "section")
    result.created.extend(create_dirs(project_root, settings))
    notify("Directories created", "done")

    notify("Initializing Go Module", "section")
    result.steps.extend(setup_go_module(project_root, settings, result.tools))
    notify("Go module initialized", "done")

    notify("Setting up Tailwind CSS", "section")
    result.steps.append(install_tailwind(project_root, result.tools))
    if write_css_input(project_root, settings):
        result.created.append(settings.css_input)
    notify("Tailwind ready", "done")

    if skip_assets:
        result.steps.append(StepResult.skip("download alpine", reason="--skip-assets"))
    else:
        notify("Downloading Alpine.js", "section")
        result.steps.append(download_alpine(project_root, settings))
        notify("Alpine.js ready", "done")

    notify("Creating/Updating .air.toml config...", "section")
    result.air_config_written = ensure_air_config(project_root, settings, force=True)
    notify(".air.toml configured", "done")

    return result
