"""Hosting platforms and how a base URL is matched to one."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional

from gitfiles.errors import InvalidPlatform, UnknownPlatform


class Platform(str, Enum):
    GITHUB = "github"
    GITLAB = "gitlab"


def parse_platform(value: str) -> Platform:
    """Case-insensitive lookup of a platform name."""
    try:
        return Platform(value.lower())
    except ValueError:
        raise InvalidPlatform(
            f"Invalid platform {value!r}: expected one of "
            + ", ".join(p.value for p in Platform)
        ) from None


def detect_platform(url: str) -> Platform:
    """Guess the platform from a plain substring test on *url*.

    Case-sensitive; a self-hosted domain that mentions neither platform
    needs an explicit choice.
    """
    if "github" in url:
        return Platform.GITHUB
    if "gitlab" in url:
        return Platform.GITLAB
    raise UnknownPlatform(f"unknown url {url}, try passing --platform")


def select_platform(
    url: str,
    explicit: Optional[Platform] = None,
    hosts: Optional[Mapping[str, Platform]] = None,
) -> Platform:
    """Explicit choice, then configured host mappings, then sniffing."""
    if explicit is not None:
        return explicit
    for host, platform in (hosts or {}).items():
        if host in url:
            return platform
    return detect_platform(url)
