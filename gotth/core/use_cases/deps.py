"""
Dependency check use case — resolve tools, install what's missing.
"""

from __future__ import annotations

from pathlib import Path

from gotth.core.interaction import Confirm, Notify, deny, log_notify
from gotth.core.models.tool import ToolRef
from gotth.core.services.tool_install import ensure_dependencies
from gotth.core.services.tool_resolver import resolve_tools


def check_deps(
    confirm: Confirm = deny,
    notify: Notify = log_notify,
    tools: dict[str, ToolRef] | None = None,
    home: Path | None = None,
) -> dict[str, ToolRef]:
    """Resolve (unless given) and ensure every required tool.

    Raises:
        GotthError: Any missing, declined or failed dependency.
    """
    notify("Checking dependencies", "section")
    if tools is None:
        tools = resolve_tools(home)
    tools = ensure_dependencies(tools, confirm=confirm, notify=notify, home=home)
    notify("System dependencies ready", "done")
    return tools
