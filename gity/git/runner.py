"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
- run_git_passthrough: Run an arbitrary git command on the terminal
"""

import subprocess
from pathlib import Path

from gity.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command, stripped. Bytes that are not valid
        UTF-8 (e.g. a Latin-1 file in a diff) are replaced, not fatal.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")


def run_git_passthrough(args: list[str]) -> int:
    """Run git with the given arguments on the inherited terminal.

    Args:
        args: Arguments to pass to git unchanged.

    Returns:
        The exit code of git.

    Raises:
        GitError: If git is not installed.
    """
    try:
        return subprocess.run(["git"] + args, check=False).returncode
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
