"""Error kinds raised while turning a local file into a permalink."""

from __future__ import annotations


class GitFilesError(Exception):
    """Base class for every failure the CLI reports to the user."""


class GitError(GitFilesError):
    """Raised when git is unavailable or a git command times out."""


# ── repository ────────────────────────────────────────────────────────────────


class RepositoryError(GitFilesError):
    """The working tree could not be used to build a permalink."""


class RepositoryNotFound(RepositoryError):
    pass


class BareRepository(RepositoryError):
    pass


class EmptyRepository(RepositoryError):
    pass


class RefResolutionFailed(RepositoryError):
    pass


# ── file path ─────────────────────────────────────────────────────────────────


class PathError(GitFilesError):
    """The target file cannot be expressed relative to the working tree."""


class PathOutsideWorkingTree(PathError):
    pass


class FileMissing(PathError):
    pass


# ── remote url ────────────────────────────────────────────────────────────────


class RemoteUrlError(GitFilesError):
    """The remote URL is absent or cannot be turned into a web URL."""


class MissingRemote(RemoteUrlError):
    pass


class InvalidRemoteForm(RemoteUrlError):
    pass


class CannotDetermineUrl(RemoteUrlError):
    pass


# ── platform ──────────────────────────────────────────────────────────────────


class PlatformError(GitFilesError):
    pass


class InvalidPlatform(PlatformError):
    pass


class UnknownPlatform(PlatformError):
    pass
