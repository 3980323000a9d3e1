"""Shared test fixtures: temp git repos in their common states."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

GITHUB_REMOTE = "git@github.com:nbouliol/git-files.git"


def git(*args: str, cwd: Path) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True,
    )
    return result.stdout.strip()


def _init(path: Path) -> None:
    subprocess.run(["git", "init", str(path)], capture_output=True, check=True)
    git("symbolic-ref", "HEAD", "refs/heads/master", cwd=path)
    git("config", "user.email", "test@test.com", cwd=path)
    git("config", "user.name", "Test", cwd=path)
    git("config", "commit.gpgsign", "false", cwd=path)


@pytest.fixture
def empty_git_repo(tmp_path: Path) -> Path:
    """A repository with no commits."""
    repo = tmp_path / "empty"
    repo.mkdir()
    _init(repo)
    return repo


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """A repository on branch ``master`` with one commit and an ssh ``origin``."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _init(repo)
    (repo / "readme.md").write_text("# Test\n")
    src = repo / "src" / "pkg"
    src.mkdir(parents=True)
    (src / "mod.py").write_text("x = 1\n")
    git("add", ".", cwd=repo)
    git("commit", "-m", "init", cwd=repo)
    git("remote", "add", "origin", GITHUB_REMOTE, cwd=repo)
    return repo


@pytest.fixture
def detached_git_repo(tmp_git_repo: Path) -> Path:
    """``tmp_git_repo`` with HEAD detached at its only commit."""
    git("checkout", "--detach", cwd=tmp_git_repo)
    return tmp_git_repo


@pytest.fixture
def bare_git_repo(tmp_git_repo: Path, tmp_path: Path) -> Path:
    bare = tmp_path / "bare.git"
    subprocess.run(
        ["git", "clone", "--bare", str(tmp_git_repo), str(bare)],
        capture_output=True, check=True,
    )
    return bare
