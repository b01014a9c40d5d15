"""
Error taxonomy — every way a bootstrap or dev-loop run can fail.

All of these are fatal: the CLI prints the message and exits 1.
Nothing is retried and nothing already written is rolled back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gotth.core.models.step import StepResult


class GotthError(Exception):
    """Base class for all fatal tool errors."""


class MissingToolError(GotthError):
    """A required tool is not installed and cannot be offered for install."""

    def __init__(self, tool_id: str, message: str):
        super().__init__(message)
        self.tool_id = tool_id


class InstallDeclinedError(GotthError):
    """The user refused to install a required tool."""

    def __init__(self, tool_id: str, message: str):
        super().__init__(message)
        self.tool_id = tool_id


class UnsupportedEnvironmentError(GotthError):
    """No supported package manager was found for a system dependency."""


class StepFailedError(GotthError):
    """An external command exited non-zero (or could not be started)."""

    def __init__(self, step: StepResult):
        detail = step.error or f"exit {step.return_code}"
        super().__init__(f"{step.name} failed: {detail}")
        self.step = step


class ProjectFileError(GotthError):
    """A project file or directory could not be read, written or removed."""

    def __init__(self, path, error: OSError | str):
        detail = (error.strerror or str(error)) if isinstance(error, OSError) else error
        super().__init__(f"{path}: {detail}")
        self.path = path
