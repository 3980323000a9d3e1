"""URL layer — remote normalization, platform dispatch, blob URL builders."""

from gitfiles.url.builders import build_url, github, gitlab
from gitfiles.url.normalize import get_url
from gitfiles.url.platform import Platform, detect_platform, parse_platform, select_platform

__all__ = [
    "Platform",
    "build_url",
    "detect_platform",
    "get_url",
    "github",
    "gitlab",
    "parse_platform",
    "select_platform",
]
