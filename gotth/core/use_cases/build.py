"""
Build use case — produce the release binary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gotth.core.interaction import Notify, log_notify
from gotth.core.models.project import ProjectSettings
from gotth.core.models.step import StepResult
from gotth.core.models.tool import ToolRef
from gotth.core.services.build_steps import build_css, compile_binary, generate_templates
from gotth.core.services.tool_install import ensure_tailwind


@dataclass
class BuildResult:
    binary: str
    steps: list[StepResult] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "binary": self.binary,
            "steps": [s.model_dump() for s in self.steps],
        }


def run_build(
    project_root: Path,
    settings: ProjectSettings,
    tools: dict[str, ToolRef],
    notify: Notify = log_notify,
) -> BuildResult:
    """templ generate → minified CSS → go build.

    Raises:
        StepFailedError: The first failing step; later ones don't run.
    """
    result = BuildResult(binary=settings.binary_path)

    result.steps.append(generate_templates(project_root, tools))
    result.steps.append(ensure_tailwind(project_root, tools))
    result.steps.append(build_css(project_root, settings, tools))

    notify("Building Binary...", "section")
    result.steps.append(compile_binary(project_root, settings, tools))
    notify("Build complete", "done")
    return result
