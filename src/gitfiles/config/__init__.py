"""Configuration loading, schema, and defaults."""

from gitfiles.config.loader import ConfigError, load_config
from gitfiles.config.schema import GitFilesConfig, PlatformConfig, RemoteConfig

__all__ = [
    "ConfigError",
    "GitFilesConfig",
    "PlatformConfig",
    "RemoteConfig",
    "load_config",
]
