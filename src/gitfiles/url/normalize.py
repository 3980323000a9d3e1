"""Turn a raw ``remote.<name>.url`` value into an HTTPS base URL."""

from __future__ import annotations

from typing import Optional

from gitfiles.errors import CannotDetermineUrl, InvalidRemoteForm, MissingRemote

_SSH_PREFIX = "git@"
_GIT_SUFFIX = ".git"


def get_url(url: Optional[str]) -> str:
    """Normalize a remote URL.

    ``git@host:owner/repo.git`` becomes ``https://host/owner/repo`` and
    ``https://host/owner/repo.git`` loses its ``.git`` suffix. Anything else
    is rejected. The final ``http`` containment test is a coarse sanity
    check, not URL validation.
    """
    if url is None:
        raise MissingRemote("cannot get repository url: no remote url configured")

    if url.startswith(_SSH_PREFIX):
        if not url.endswith(_GIT_SUFFIX):
            raise InvalidRemoteForm(f"Invalid remote form: {url}")
        stripped = url[len(_SSH_PREFIX):-len(_GIT_SUFFIX)]
        parsed = "https://" + stripped.replace(":", "/")
    elif url.endswith(_GIT_SUFFIX):
        parsed = url[:-len(_GIT_SUFFIX)]
    else:
        raise CannotDetermineUrl(f"cannot get repository url from remote: {url}")

    if "http" not in parsed:
        raise InvalidRemoteForm(f"Invalid remote form: {url}")
    return parsed
