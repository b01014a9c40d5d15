"""
Project context — the single source of truth for "what project are we working on."

The root is set ONCE at startup by the CLI (main.py) and read by any
service that needs it without being handed a path explicitly.
Tests set it to ``tmp_path``.

get_project_root() returns None when unset; callers fall back to cwd.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


_project_root: Optional[Path] = None


def set_project_root(root: Path) -> None:
    """Register the project root for the current process."""
    global _project_root
    _project_root = root


def get_project_root() -> Optional[Path]:
    """Return the current project root, or None if not yet set."""
    return _project_root
