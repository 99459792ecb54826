"""Configuration module for feedsearch."""

from feedsearch.config.loader import get_config_path, load_config, save_config
from feedsearch.config.schema import Config, MessagesConfig, SearchConfig

__all__ = [
    "Config",
    "MessagesConfig",
    "SearchConfig",
    "get_config_path",
    "load_config",
    "save_config",
]
