"""
Domain models — Pydantic types for the bootstrapper.

All models are re-exported here for convenient access:

    from gotth.core.models import ProjectSettings, ToolRef, StepResult
"""

from gotth.core.models.project import ProjectSettings
from gotth.core.models.step import StepResult
from gotth.core.models.template import GeneratedFile
from gotth.core.models.tool import ToolRef, ToolSpec

__all__ = [
    # template.py
    "GeneratedFile",
    # project.py
    "ProjectSettings",
    # step.py
    "StepResult",
    # tool.py
    "ToolRef",
    "ToolSpec",
]
