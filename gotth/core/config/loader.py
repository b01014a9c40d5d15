"""
Configuration loader — reads the optional gotth.yml into ProjectSettings.

Every key is optional. Without a config file the project name is the
basename of the project root and everything else takes its default.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from gotth.core.models.project import ProjectSettings

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = "gotth.yml"


class ConfigError(Exception):
    """Raised when gotth.yml is unreadable or invalid."""


def find_project_file(start_dir: Path | None = None) -> Path | None:
    """Search for gotth.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to gotth.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def project_root(config_path: Path | None) -> Path:
    """Project root for a config file path, or cwd when there is none."""
    if config_path is None:
        return Path.cwd().resolve()
    return config_path.parent.resolve()


def load_settings(root: Path, config_path: Path | None = None) -> ProjectSettings:
    """Build ProjectSettings for the project at *root*.

    Args:
        root: Project root directory; its basename is the default name.
        config_path: Explicit gotth.yml. If None, ``root/gotth.yml`` is
            used when present.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    if config_path is None:
        candidate = root / PROJECT_CONFIG_FILE
        config_path = candidate if candidate.is_file() else None

    data: dict = {}
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")

        logger.debug("Loading settings from %s", config_path)
        try:
            raw = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        try:
            loaded = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(
                f"Expected a YAML mapping in {config_path}, got {type(loaded).__name__}"
            )
        data = loaded

    data.setdefault("name", root.name)

    try:
        settings = ProjectSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid project configuration: {e}") from e

    logger.info("Project '%s' at %s", settings.name, root)
    return settings
