"""Load and merge configuration from .gitfiles.toml and env vars."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitfiles.config.schema import GitFilesConfig, PlatformConfig, RemoteConfig
from gitfiles.errors import GitFilesError, InvalidPlatform
from gitfiles.url.platform import Platform, parse_platform

CONFIG_FILENAME = ".gitfiles.toml"


class ConfigError(GitFilesError):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _platform(value: Any, where: str) -> Platform:
    if not isinstance(value, str):
        raise ConfigError(f"{where}: expected a platform name, got {value!r}")
    try:
        return parse_platform(value)
    except InvalidPlatform as exc:
        raise ConfigError(f"{where}: {exc}") from exc


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a table")
    return section


def _build_remote(data: Dict[str, Any]) -> RemoteConfig:
    section = _section(data, "remote")
    cfg = RemoteConfig()
    if "name" in section:
        cfg.name = str(section["name"])
    if section.get("url"):
        cfg.url = str(section["url"])
    return cfg


def _build_platform(data: Dict[str, Any]) -> PlatformConfig:
    section = _section(data, "platform")
    cfg = PlatformConfig()
    if "default" in section:
        cfg.default = _platform(section["default"], "platform.default")
    hosts = section.get("hosts", {})
    if not isinstance(hosts, dict):
        raise ConfigError("platform.hosts must be a table of host = platform")
    cfg.hosts = {
        str(host): _platform(name, f"platform.hosts.{host}")
        for host, name in hosts.items()
    }
    return cfg


def _merge_env_overrides(cfg: GitFilesConfig) -> None:
    """Apply GIT_FILES_* environment variable overrides."""
    if val := os.environ.get("GIT_FILES_REMOTE"):
        cfg.remote.name = val
    if val := os.environ.get("GIT_FILES_URL"):
        cfg.remote.url = val
    if val := os.environ.get("GIT_FILES_PLATFORM"):
        try:
            cfg.platform.default = parse_platform(val)
        except InvalidPlatform:
            pass


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GitFilesConfig:
    """Load, validate, and return a GitFilesConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GitFilesConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GitFilesConfig(
            remote=_build_remote(raw),
            platform=_build_platform(raw),
        )

    _merge_env_overrides(cfg)
    return cfg
