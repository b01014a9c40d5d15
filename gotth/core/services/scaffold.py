"""
Scaffolder — create the project skeleton.

Directories are created with ``exist_ok``; files are only written
when absent. Running it again never touches existing content.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gotth.core.errors import ProjectFileError
from gotth.core.models.project import ProjectSettings
from gotth.core.services.generators.css_input import render_css_input
from gotth.core.services.generators.main_go import render_main_go

logger = logging.getLogger(__name__)


def create_dirs(project_root: Path, settings: ProjectSettings) -> list[str]:
    """Create the skeleton directories and the placeholder entry point.

    Returns:
        Relative paths created by this call (existing ones are omitted).
    """
    created: list[str] = []
    for rel in settings.directories:
        target = project_root / rel
        if not target.is_dir():
            try:
                target.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ProjectFileError(target, e) from e
            created.append(rel)

    main_go = render_main_go(settings)
    if main_go.write(project_root):
        created.append(main_go.path)
        logger.info("Created %s", main_go.path)
    else:
        logger.debug("Keeping existing %s", main_go.path)

    return created


def write_css_input(project_root: Path, settings: ProjectSettings) -> bool:
    """Write the Tailwind input stylesheet unless one already exists."""
    return render_css_input(settings).write(project_root)
