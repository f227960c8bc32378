"""Git diff utilities.

Contains:
- get_staged_diff: Get the diff of the changes currently staged
- has_unstaged_changes: Check for modified or untracked files outside the index
"""

from gity.git.runner import _run_git_command


def get_staged_diff() -> str:
    """Get the unified diff of the staged changes.

    Returns:
        The staged diff, empty when nothing is staged.

    Raises:
        GitError: If git fails (e.g. not inside a repository).
    """
    return _run_git_command(["diff", "--cached"])


def has_unstaged_changes() -> bool:
    """Check whether the working tree has changes that are not staged.

    Returns:
        True if there are unstaged modifications or untracked files.

    Raises:
        GitError: If git fails.
    """
    if _run_git_command(["diff"]):
        return True

    status = _run_git_command(["status", "--porcelain"])
    return any(line.startswith("??") for line in status.splitlines())
