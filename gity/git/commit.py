"""Git commit execution."""

import subprocess

from gity.git.exceptions import CommitError, GitError


def commit_with_message(message: str) -> None:
    """Commit the staged changes with the given message.

    The message is passed as a single argument, so quotes and newlines
    reach git unchanged. Output and hooks use the inherited terminal.

    Args:
        message: The full commit message.

    Raises:
        CommitError: If git exits with a non-zero status.
        GitError: If git is not installed.
    """
    try:
        result = subprocess.run(
            ["git", "commit", "-m", message],
            check=False,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    if result.returncode != 0:
        raise CommitError(f"git commit failed with exit code {result.returncode}")
