"""Configuration loading utilities."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from feedsearch.config.schema import Config

_LEGACY_SEARCH_KEYS = (
    "feedUrl",
    "baseUrl",
    "debounceMs",
    "minQueryLength",
    "snippetLength",
    "fetchTimeoutS",
)


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".feedsearch" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("config root must be an object")
            data = _migrate_config(data)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValidationError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            logger.warning("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    # Move top-level feedUrl/debounceMs/... -> search.*
    search_cfg = data.setdefault("search", {})
    if not isinstance(search_cfg, dict):
        raise ValueError("search section must be an object")
    for key in _LEGACY_SEARCH_KEYS:
        if key in data:
            value = data.pop(key)
            search_cfg.setdefault(key, value)

    return data
