"""
Build steps — templ generation, Tailwind compilation, go build.

Each function is one blocking step through the runner; a failure
raises StepFailedError and halts the caller's sequence.
"""

from __future__ import annotations

from pathlib import Path

from gotth.core.models.project import ProjectSettings
from gotth.core.models.step import StepResult
from gotth.core.models.tool import ToolRef
from gotth.core.services import runner

TAILWIND_CLI = "@tailwindcss/cli"


def tailwind_cmd(
    tools: dict[str, ToolRef],
    settings: ProjectSettings,
    *,
    watch: bool = False,
    minify: bool = False,
) -> list[str]:
    """Build the ``bun x @tailwindcss/cli`` command line."""
    cmd = [
        tools["bun"].command, "x", TAILWIND_CLI,
        "-i", settings.css_input,
        "-o", settings.css_output,
    ]
    if watch:
        cmd.append("--watch")
    if minify:
        cmd.append("--minify")
    return cmd


def generate_templates(project_root: Path, tools: dict[str, ToolRef]) -> StepResult:
    return runner.run_step(
        "templ generate", [tools["templ"].command, "generate"], cwd=project_root,
    )


def build_css(
    project_root: Path,
    settings: ProjectSettings,
    tools: dict[str, ToolRef],
) -> StepResult:
    """One-shot production stylesheet (minified, no watch)."""
    return runner.run_step(
        "tailwind build",
        tailwind_cmd(tools, settings, minify=True),
        cwd=project_root,
    )


def compile_binary(
    project_root: Path,
    settings: ProjectSettings,
    tools: dict[str, ToolRef],
) -> StepResult:
    return runner.run_step(
        "go build",
        [tools["go"].command, "build", "-o", settings.binary_path, settings.main_go],
        cwd=project_root,
    )
