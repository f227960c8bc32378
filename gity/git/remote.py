"""Remote repository URL utilities.

Contains:
- get_remote_url: Read a remote's URL from the git config
- git_url_to_browser_url: Convert a clone URL into a web URL
- get_repo_browser_url: Web URL of the current repository's origin
"""

import re

from gity.git.exceptions import GitError
from gity.git.runner import _run_git_command

_SCP_URL_RE = re.compile(r"^[\w.-]+@([^:/]+):(.+?)(?:\.git)?/?$")
_SSH_URL_RE = re.compile(r"^ssh://(?:[^@/]+@)?([^/:]+)(?::\d+)?/(.+?)(?:\.git)?/?$")


def get_remote_url(remote: str = "origin") -> str:
    """Get the configured URL of a remote.

    Args:
        remote: The remote name.

    Returns:
        The remote URL.

    Raises:
        GitError: If the remote has no URL configured.
    """
    try:
        url = _run_git_command(["config", "--get", f"remote.{remote}.url"])
    except GitError:
        url = ""
    if not url:
        raise GitError(f"Remote {remote} URL not found in git config.")
    return url


def git_url_to_browser_url(git_url: str) -> str:
    """Convert a git remote URL to a URL that can be opened in a browser.

    Handles SSH (git@github.com:user/repo.git, ssh://git@host/user/repo.git)
    and HTTP(S) (https://github.com/user/repo.git) formats.

    Args:
        git_url: The remote URL.

    Returns:
        The https:// (or http://) web URL of the repository.

    Raises:
        GitError: If the URL format is not supported.
    """
    git_url = git_url.strip()

    if git_url.startswith(("https://", "http://")):
        return re.sub(r"\.git/?$", "", git_url.rstrip("/"))

    for pattern in (_SSH_URL_RE, _SCP_URL_RE):
        match = pattern.match(git_url)
        if match:
            host, path = match.groups()
            return f"https://{host}/{path}"

    raise GitError(f"Unsupported git URL format: {git_url}")


def get_repo_browser_url(remote: str = "origin") -> str:
    """Get the browser URL of the current repository.

    Args:
        remote: The remote name.

    Returns:
        The web URL of the repository.

    Raises:
        GitError: If the remote is missing or its URL is unsupported.
    """
    return git_url_to_browser_url(get_remote_url(remote))
