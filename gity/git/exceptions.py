"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NoStagedChangesError: Raised when there are no staged changes
- CommitError: Raised when `git commit` exits with a non-zero status
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    pass


class CommitError(GitError):
    """Raised when the commit command fails (e.g. rejected by a hook)."""

    pass
