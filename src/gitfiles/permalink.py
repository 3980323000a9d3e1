"""Permalink resolution: repository state, remote URL and platform in, blob URL out."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from gitfiles.config.schema import GitFilesConfig
from gitfiles.git.adapter import get_remote_url, relative_path, resolve_head
from gitfiles.git.models import Repository, ResolvedRef
from gitfiles.url.builders import build_url
from gitfiles.url.normalize import get_url
from gitfiles.url.platform import Platform, select_platform


@dataclass(frozen=True)
class PermalinkRequest:
    """What the caller asked for. ``None`` fields fall back to config."""

    file: Path
    line: Optional[int] = None
    platform: Optional[Platform] = None
    url: Optional[str] = None  # used verbatim when given
    remote: Optional[str] = None


@dataclass(frozen=True)
class Permalink:
    url: str
    base_url: str
    ref: ResolvedRef
    path: str
    platform: Platform
    line: Optional[int] = None


def resolve_base_url(repo: Repository, request: PermalinkRequest, config: GitFilesConfig) -> str:
    """Explicit URL, then configured URL, then the normalized remote URL."""
    if request.url:
        return request.url
    if config.remote.url:
        return config.remote.url
    remote = request.remote or config.remote.name
    return get_url(get_remote_url(repo, remote))


def resolve_permalink(
    request: PermalinkRequest,
    repo: Repository,
    config: Optional[GitFilesConfig] = None,
    cwd: Optional[Path] = None,
) -> Permalink:
    """Build the blob URL for ``request.file`` at the current HEAD."""
    config = config or GitFilesConfig()

    ref = resolve_head(repo)
    path = relative_path(repo, request.file, cwd=cwd)
    base_url = resolve_base_url(repo, request, config)
    platform = select_platform(
        base_url,
        explicit=request.platform or config.platform.default,
        hosts=config.platform.hosts,
    )

    return Permalink(
        url=build_url(platform, base_url, ref.name, path, request.line),
        base_url=base_url,
        ref=ref,
        path=path,
        platform=platform,
        line=request.line,
    )
