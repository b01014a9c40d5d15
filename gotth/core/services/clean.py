"""
Clean — remove build output and generated templ Go files.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from gotth.core.errors import ProjectFileError
from gotth.core.models.project import ProjectSettings

logger = logging.getLogger(__name__)

TEMPL_OUTPUT_SUFFIX = "_templ.go"

# Never descend into these while looking for generated files.
_SKIP_DIRS = {".git", "node_modules", "vendor"}


def find_templ_outputs(project_root: Path) -> list[Path]:
    """All ``*_templ.go`` files under the project, sorted."""
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(project_root):
        dirnames[:] = [d for d in dirnames if d not in _SKIP_DIRS]
        for name in filenames:
            if name.endswith(TEMPL_OUTPUT_SUFFIX):
                found.append(Path(dirpath) / name)
    return sorted(found)


def _inside(project_root: Path, target: Path) -> bool:
    """Whether *target* resolves strictly below *project_root*."""
    root = project_root.resolve()
    resolved = target.resolve()
    return resolved != root and resolved.is_relative_to(root)


def clean_project(project_root: Path, settings: ProjectSettings) -> list[str]:
    """Delete the build directory and generated template files.

    Returns:
        Relative paths that were removed.

    Raises:
        ProjectFileError: The build directory resolves outside the
            project, or a path could not be removed.
    """
    removed: list[str] = []

    build_dir = project_root / settings.build_dir
    if not _inside(project_root, build_dir):
        raise ProjectFileError(
            build_dir, f"build_dir {settings.build_dir!r} is outside the project; refusing to delete",
        )
    if build_dir.is_dir():
        try:
            shutil.rmtree(build_dir)
        except OSError as e:
            raise ProjectFileError(build_dir, e) from e
        removed.append(settings.build_dir)

    for path in find_templ_outputs(project_root):
        try:
            path.unlink()
        except OSError as e:
            raise ProjectFileError(path, e) from e
        removed.append(str(path.relative_to(project_root)))

    logger.info("Removed %d path(s)", len(removed))
    return removed
