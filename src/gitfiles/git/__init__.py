"""Git interface layer — adapter and models."""

from gitfiles.git.adapter import (
    get_remote_url,
    open_repository,
    relative_path,
    resolve_head,
)
from gitfiles.git.models import Repository, ResolvedRef

__all__ = [
    "Repository",
    "ResolvedRef",
    "get_remote_url",
    "open_repository",
    "relative_path",
    "resolve_head",
]
