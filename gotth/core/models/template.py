"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from gotth.core.errors import ProjectFileError


class GeneratedFile(BaseModel):
    """A file produced by a generator.

    Attributes:
        path:      Relative path from project root.
        content:   Full file content.
        overwrite: Whether to overwrite if already exists.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""

    def write(self, project_root: Path) -> bool:
        """Write the file under *project_root*.

        Returns True if the file was written, False if it already
        existed and ``overwrite`` is off.

        Raises:
            ProjectFileError: The file or its directory could not be written.
        """
        target = project_root / self.path
        if target.exists() and not self.overwrite:
            return False
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self.content, encoding="utf-8")
        except OSError as e:
            raise ProjectFileError(target, e) from e
        return True
