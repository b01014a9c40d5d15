"""
Go module setup — ``go mod init`` plus the templ runtime dependency.
"""

from __future__ import annotations

from pathlib import Path

from gotth.core.models.project import ProjectSettings
from gotth.core.models.step import StepResult
from gotth.core.models.tool import ToolRef
from gotth.core.services import runner

TEMPL_MODULE = "github.com/a-h/templ"


def has_go_module(project_root: Path) -> bool:
    return (project_root / "go.mod").is_file()


def setup_go_module(
    project_root: Path,
    settings: ProjectSettings,
    tools: dict[str, ToolRef],
) -> list[StepResult]:
    """Initialise go.mod (if absent) and fetch templ.

    Raises:
        StepFailedError: A go command failed.
    """
    go = tools["go"].command
    steps: list[StepResult] = []

    if has_go_module(project_root):
        steps.append(StepResult.skip("go mod init", reason="go.mod exists"))
    else:
        steps.append(runner.run_step(
            "go mod init", [go, "mod", "init", settings.name], cwd=project_root,
        ))

    steps.append(runner.run_step(
        "go get templ", [go, "get", TEMPL_MODULE], cwd=project_root,
    ))
    return steps
