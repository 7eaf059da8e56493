"""Application configuration helpers."""

from __future__ import annotations

from .collection import (
    ALBUM_KEY_VAR,
    COLLECTION_PATH_VAR,
    DEFAULT_COLLECTION_FILENAME,
    CollectionConfig,
    get_collection_config,
    parse_album_key_mode,
)
from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging

__all__ = [
    "ALBUM_KEY_VAR",
    "COLLECTION_PATH_VAR",
    "DEFAULT_COLLECTION_FILENAME",
    "CollectionConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "configure_logging",
    "get_collection_config",
    "optional_env_var",
    "parse_album_key_mode",
    "require_env_var",
    "require_env_vars",
]
