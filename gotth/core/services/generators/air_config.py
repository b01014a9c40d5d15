"""
.air.toml generator — live-reload runner configuration.

The file is regenerated wholesale whenever it is missing or lacks the
``full_bin`` marker. Edits to a file that still carries the marker are
preserved; edits to one that doesn't are lost.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gotth.core.errors import ProjectFileError
from gotth.core.models.project import ProjectSettings
from gotth.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)

AIR_CONFIG_FILE = ".air.toml"
AIR_CONFIG_MARKER = "full_bin"

INCLUDE_EXT = ("go", "tpl", "tmpl", "html", "templ")
EXCLUDE_DIR = ("assets", "tmp", "vendor", "node_modules", "static", "pb_data")
EXCLUDE_REGEX = ("_test.go", ".*_templ.go")


def _toml_list(items: tuple[str, ...]) -> str:
    return "[" + ", ".join(f'"{item}"' for item in items) + "]"


def render_air_config(settings: ProjectSettings) -> GeneratedFile:
    """Render .air.toml for *settings*."""
    binary = f"./{settings.binary_path}"
    build_cmd = (
        f"templ generate && go build -o {binary} ./{settings.main_go}"
    )
    full_bin = f"{binary} serve --http=0.0.0.0:{settings.app_port}"

    content = (
        f'root = "."\n'
        f'tmp_dir = "{settings.build_dir}"\n'
        f"\n"
        f"[build]\n"
        f'  cmd = "{build_cmd}"\n'
        f'  bin = "{binary}"\n'
        f'  full_bin = "{full_bin}"\n'
        f"  include_ext = {_toml_list(INCLUDE_EXT)}\n"
        f"  exclude_dir = {_toml_list(EXCLUDE_DIR)}\n"
        f"  exclude_regex = {_toml_list(EXCLUDE_REGEX)}\n"
        f"  stop_on_error = true\n"
        f"\n"
        f"[log]\n"
        f"  time = false\n"
        f"\n"
        f"[misc]\n"
        f"  clean_on_exit = true\n"
        f"\n"
        f"[proxy]\n"
        f"  enabled = true\n"
        f"  proxy_port = {settings.proxy_port}\n"
        f"  app_port = {settings.app_port}\n"
    )

    return GeneratedFile(
        path=AIR_CONFIG_FILE,
        content=content,
        overwrite=True,
        reason="air live-reload config with serve command and proxy",
    )


def air_config_is_current(project_root: Path) -> bool:
    """Whether .air.toml exists and carries the marker field."""
    path = project_root / AIR_CONFIG_FILE
    if not path.is_file():
        return False
    try:
        return AIR_CONFIG_MARKER.encode() in path.read_bytes()
    except OSError as e:
        raise ProjectFileError(path, e) from e


def ensure_air_config(
    project_root: Path,
    settings: ProjectSettings,
    force: bool = False,
) -> bool:
    """Write .air.toml if missing, stale, or *force* is set.

    Returns:
        True if the file was (re)written.
    """
    if not force and air_config_is_current(project_root):
        logger.debug("%s already has %s", AIR_CONFIG_FILE, AIR_CONFIG_MARKER)
        return False

    render_air_config(settings).write(project_root)
    logger.info("Wrote %s", project_root / AIR_CONFIG_FILE)
    return True
