"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quicklaunch.core.config.models import AppConfig
from quicklaunch.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_APP_CONFIG_PATH = Path("quicklaunch.yaml")


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ConfigError: If format cannot be determined

    Example:
        >>> detect_format("quicklaunch.json")
        'json'
        >>> detect_format("quicklaunch.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    raise ConfigError(f"Unsupported config format: {suffix or file_path}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        ConfigError: If the file is missing, unsupported or unparseable
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file does not exist: {path}")

    fmt = detect_format(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            if fmt == "json":
                content = json.load(f)
            else:
                content = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid {fmt.upper()} in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file at the default location means "all defaults"; an
    explicitly requested file must exist.

    Args:
        path: Path to app config file (.json, .yaml, or .yml)

    Returns:
        Validated AppConfig instance with defaults for missing values

    Raises:
        ConfigError: If the file is missing (explicit path) or invalid
    """
    if path is None:
        if not DEFAULT_APP_CONFIG_PATH.exists():
            logger.debug("No %s found, using defaults", DEFAULT_APP_CONFIG_PATH)
            return AppConfig()
        path = DEFAULT_APP_CONFIG_PATH

    raw_config = load_config(path)
    try:
        return AppConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def apply_overrides(config: AppConfig, overrides: dict[str, dict[str, Any]]) -> AppConfig:
    """Return a copy of ``config`` with per-section overrides applied.

    ``None`` values are ignored so CLI flags that were not given leave the
    file value alone.

    Example:
        >>> cfg = apply_overrides(AppConfig(), {"generator": {"variant": "multi"}})
        >>> cfg.generator.variant.value
        'multi'
    """
    data = config.model_dump()
    for section, values in overrides.items():
        data[section].update({k: v for k, v in values.items() if v is not None})
    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration override: {e}") from e
