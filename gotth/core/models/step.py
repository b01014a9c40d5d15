"""
Step result model — the outcome of one blocking external command.

Every shell-out (go build, templ generate, bun add, package installs)
is recorded as a StepResult. Failures are turned into StepFailedError
by the runner, so callers only ever see successful or skipped results.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class StepResult(BaseModel):
    """Result of a single external step."""

    name: str
    command: list[str] = Field(default_factory=list)
    status: Literal["ok", "skipped", "failed"] = "ok"

    started_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0
    return_code: int | None = None
    output: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the step succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the step failed."""
        return self.status == "failed"

    @classmethod
    def success(cls, name: str, command: list[str], **kwargs: Any) -> StepResult:
        """Create a success result."""
        return cls(name=name, command=command, status="ok", **kwargs)

    @classmethod
    def failure(
        cls,
        name: str,
        command: list[str],
        error: str,
        **kwargs: Any,
    ) -> StepResult:
        """Create a failure result."""
        return cls(name=name, command=command, status="failed", error=error, **kwargs)

    @classmethod
    def skip(cls, name: str, reason: str = "", **kwargs: Any) -> StepResult:
        """Create a skip result."""
        return cls(name=name, status="skipped", output=reason, **kwargs)
