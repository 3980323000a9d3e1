"""Blob URL builders, one per hosting platform."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from gitfiles.url.platform import Platform

Builder = Callable[[str, str, str, Optional[int]], str]


def _anchor(line: Optional[int]) -> str:
    return f"#L{line}" if line is not None else ""


def github(repo_url: str, ref: str, path: str, line: Optional[int] = None) -> str:
    """``{repo_url}/blob/{ref}/{path}``, optionally anchored at ``#L{line}``."""
    return f"{repo_url}/blob/{ref}/{path}{_anchor(line)}"


def gitlab(repo_url: str, ref: str, path: str, line: Optional[int] = None) -> str:
    """``{repo_url}/-/blob/{ref}/{path}``, optionally anchored at ``#L{line}``."""
    return f"{repo_url}/-/blob/{ref}/{path}{_anchor(line)}"


BUILDERS: Dict[Platform, Builder] = {
    Platform.GITHUB: github,
    Platform.GITLAB: gitlab,
}


def build_url(
    platform: Platform,
    repo_url: str,
    ref: str,
    path: str,
    line: Optional[int] = None,
) -> str:
    return BUILDERS[platform](repo_url, ref, path, line)
