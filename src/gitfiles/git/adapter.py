"""Thin wrapper around the git executable."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

from gitfiles.errors import (
    BareRepository,
    EmptyRepository,
    FileMissing,
    GitError,
    PathOutsideWorkingTree,
    RefResolutionFailed,
    RepositoryNotFound,
)
from gitfiles.git.models import Repository, ResolvedRef

_BRANCH_PREFIX = "refs/heads/"


def _run_git(args: list[str], cwd: Path, *, check: bool = True, timeout: int = 30) -> Optional[str]:
    """Run a git command and return stripped stdout.

    A non-zero exit raises GitError, or returns None when *check* is False.
    """
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        if not check:
            return None
        raise GitError(f"git error: {result.stderr.strip()}")
    return result.stdout.strip()


def open_repository(cwd: Optional[Path] = None) -> Repository:
    """Find the repository containing *cwd* (or an ancestor) and validate it."""
    cwd = cwd or Path.cwd()

    git_dir = _run_git(["rev-parse", "--absolute-git-dir"], cwd=cwd, check=False)
    if git_dir is None:
        raise RepositoryNotFound(f"Not a git repository (or any parent): {cwd}")

    if _run_git(["rev-parse", "--is-bare-repository"], cwd=cwd) == "true":
        raise BareRepository("Cannot use a bare repository")

    workdir = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd, check=False)
    if not workdir:
        raise RepositoryNotFound(f"No working tree found for {git_dir}")

    if _run_git(["rev-parse", "--verify", "-q", "HEAD"], cwd=cwd, check=False) is None:
        raise EmptyRepository("Cannot use an empty repository")

    return Repository(workdir=Path(workdir).resolve(), git_dir=Path(git_dir))


def resolve_head(repo: Repository) -> ResolvedRef:
    """Return the checked-out branch, or the commit id when HEAD is detached."""
    symbolic = _run_git(["symbolic-ref", "-q", "HEAD"], cwd=repo.workdir, check=False)
    if symbolic:
        return ResolvedRef(name=symbolic.removeprefix(_BRANCH_PREFIX), is_branch=True)

    commit = _run_git(["rev-parse", "--verify", "-q", "HEAD^{commit}"], cwd=repo.workdir, check=False)
    if not commit:
        raise RefResolutionFailed("Cannot get branch or commit")
    return ResolvedRef(name=commit, is_branch=False)


def get_remote_url(repo: Repository, name: str = "origin") -> Optional[str]:
    """Return the configured URL of remote *name*, or None if it has none."""
    url = _run_git(["config", "--get", f"remote.{name}.url"], cwd=repo.workdir, check=False)
    return url or None


def relative_path(repo: Repository, file: Path, cwd: Optional[Path] = None) -> str:
    """Return *file* as a slash-separated path relative to the working tree root."""
    file = Path(file)
    if not file.is_absolute():
        file = (cwd or Path.cwd()) / file

    try:
        absolute = file.resolve(strict=True)
    except (FileNotFoundError, NotADirectoryError):
        raise FileMissing(f"No such file: {file}") from None

    try:
        return absolute.relative_to(repo.workdir).as_posix()
    except ValueError:
        raise PathOutsideWorkingTree(
            f"{absolute} is outside the working tree {repo.workdir}"
        ) from None
