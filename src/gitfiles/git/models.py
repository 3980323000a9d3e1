"""Data models for the working tree being linked."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Repository:
    """A non-bare repository with at least one commit."""

    workdir: Path  # canonical working tree root
    git_dir: Path


@dataclass(frozen=True, slots=True)
class ResolvedRef:
    """What HEAD points at: a branch name or, when detached, a commit id."""

    name: str
    is_branch: bool

    @property
    def is_commit(self) -> bool:
        return not self.is_branch
