"""
Tailwind entry stylesheet generator.
"""

from __future__ import annotations

from gotth.core.models.project import ProjectSettings
from gotth.core.models.template import GeneratedFile

_CSS_INPUT = "@tailwind base;\n@tailwind components;\n@tailwind utilities;"


def render_css_input(settings: ProjectSettings) -> GeneratedFile:
    return GeneratedFile(
        path=settings.css_input,
        content=_CSS_INPUT,
        overwrite=False,
        reason="Tailwind directives",
    )
