"""
Tool models — what a required tool is, and where it was found.

ToolSpec is static catalog data (see services/tool_resolver.py).
ToolRef is the per-invocation resolution of one spec.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ToolSpec(BaseModel):
    """A required external tool.

    Attributes:
        id:           Logical identifier ("go", "bun", "templ", ...).
        label:        Human-readable name used in prompts.
        cli:          Executable name looked up on PATH.
        fallback:     User-local install path relative to $HOME, if the
                      tool installs somewhere predictable.
        go_bin:       Installed by ``go install`` into $GOPATH/bin.
        install_kind: How to install it when missing.
        install_cmd:  Install command for script and go installs.
        package:      System package name for ``system`` installs.
        purpose:      Why the tool is needed, shown in the install prompt.
        required_msg: Shown when the user declines installation.
    """

    id: str
    label: str
    cli: str
    fallback: str | None = None
    go_bin: bool = False
    install_kind: Literal["none", "script", "go", "system"] = "none"
    install_cmd: list[str] = Field(default_factory=list)
    package: str | None = None
    purpose: str = ""
    required_msg: str = ""


class ToolRef(BaseModel):
    """A resolved tool: the command string every later step invokes."""

    id: str
    label: str
    command: str
    source: Literal["path", "fallback", "bare"] = "bare"

    @property
    def found(self) -> bool:
        """Whether the tool was located on this machine."""
        return self.source != "bare"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "command": self.command,
            "source": self.source,
            "found": self.found,
        }
