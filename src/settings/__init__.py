"""Configuration loading for docsnap."""

from settings.config import (
    CONFIG_FILENAME,
    ConfigError,
    DocsnapConfig,
    RemoteConfig,
    load_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DocsnapConfig",
    "RemoteConfig",
    "load_config",
]
