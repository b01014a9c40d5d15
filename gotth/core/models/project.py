"""
Project settings — the fixed layout and ports of a managed project.

Defaults reproduce the conventional layout; an optional gotth.yml may
override any of them (see core/config/loader.py).
"""

from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

ALPINE_URL = "https://cdn.jsdelivr.net/npm/alpinejs@latest/dist/cdn.min.js"


def _relative_inside(value: str) -> str:
    """Reject paths that would point at or above the project root."""
    if not value or not value.strip():
        raise ValueError("must not be empty")
    path = PurePosixPath(value.replace("\\", "/"))
    if not path.parts or str(path) == ".":
        raise ValueError("must not be the project root itself")
    if path.is_absolute() or ":" in path.parts[0]:
        raise ValueError(f"must be relative to the project root, got {value!r}")
    if ".." in path.parts:
        raise ValueError(f"must not contain '..', got {value!r}")
    return value


class ProjectSettings(BaseModel):
    """Layout, ports and asset sources for one project."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    app_port: int = Field(default=42069, ge=1, le=65535)
    proxy_port: int = Field(default=8090, ge=1, le=65535)

    static_dir: str = "static"
    views_dir: str = "views"
    cmd_dir: str = "cmd"
    build_dir: str = "tmp"

    css_input: str = "static/css/input.css"
    css_output: str = "static/css/styles.css"
    alpine_url: str = ALPINE_URL

    @field_validator("name")
    @classmethod
    def _single_segment(cls, v: str) -> str:
        _relative_inside(v)
        if len(PurePosixPath(v.replace("\\", "/")).parts) != 1:
            raise ValueError(f"must be a single path segment, got {v!r}")
        return v

    @field_validator("static_dir", "views_dir", "cmd_dir", "build_dir", "css_input", "css_output")
    @classmethod
    def _inside_project(cls, v: str) -> str:
        return _relative_inside(v)

    @property
    def main_go(self) -> str:
        """Entry-point path relative to the project root."""
        return f"{self.cmd_dir}/{self.name}/main.go"

    @property
    def binary_path(self) -> str:
        """Release / dev binary path relative to the project root."""
        return f"{self.build_dir}/main"

    @property
    def directories(self) -> list[str]:
        """The project skeleton, in creation order."""
        return [
            f"{self.static_dir}/js",
            f"{self.static_dir}/css",
            f"{self.views_dir}/components",
            f"{self.views_dir}/layouts",
            f"{self.views_dir}/pages",
            f"{self.cmd_dir}/{self.name}",
        ]
