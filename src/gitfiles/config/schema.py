"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from gitfiles.url.platform import Platform

DEFAULT_REMOTE = "origin"


@dataclass
class RemoteConfig:
    name: str = DEFAULT_REMOTE
    url: Optional[str] = None  # used verbatim, skips the remote lookup


@dataclass
class PlatformConfig:
    default: Optional[Platform] = None
    hosts: Dict[str, Platform] = field(default_factory=dict)  # url substring -> platform


@dataclass
class GitFilesConfig:
    remote: RemoteConfig = field(default_factory=RemoteConfig)
    platform: PlatformConfig = field(default_factory=PlatformConfig)
