"""
Static asset download — vendored front-end scripts.
"""

from __future__ import annotations

import logging
import time
import urllib.error
import urllib.request
from pathlib import Path

from gotth.core.errors import ProjectFileError, StepFailedError
from gotth.core.models.project import ProjectSettings
from gotth.core.models.step import StepResult

logger = logging.getLogger(__name__)

ALPINE_FILE = "alpine.min.js"


def download_alpine(
    project_root: Path,
    settings: ProjectSettings,
    timeout: int = 30,
) -> StepResult:
    """Fetch Alpine.js into ``<static>/js/alpine.min.js``.

    Raises:
        StepFailedError: The download failed.
        ProjectFileError: The script could not be saved.
    """
    target = project_root / settings.static_dir / "js" / ALPINE_FILE
    cmd = ["download", settings.alpine_url]

    logger.info("Downloading %s -> %s", settings.alpine_url, target)
    start = time.monotonic()
    try:
        req = urllib.request.Request(
            settings.alpine_url, headers={"User-Agent": "gotth"},
        )
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            body = resp.read()
    except (urllib.error.URLError, OSError) as e:
        raise StepFailedError(StepResult.failure(
            "download alpine", cmd, error=str(e),
        ))

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(body)
    except OSError as e:
        raise ProjectFileError(target, e) from e
    return StepResult.success(
        "download alpine",
        cmd,
        duration_ms=int((time.monotonic() - start) * 1000),
    )
