"""Git collaborators for gity.

This package wraps the git command line:
- exceptions: GitError, NoStagedChangesError, CommitError
- runner: _run_git_command, get_repo_root, run_git_passthrough
- diff: get_staged_diff, has_unstaged_changes
- commit: commit_with_message
- remote: get_remote_url, git_url_to_browser_url, get_repo_browser_url
"""

# Exceptions
from gity.git.exceptions import (
    CommitError,
    GitError,
    NoStagedChangesError,
)

# Runner utilities
from gity.git.runner import (
    _run_git_command,
    get_repo_root,
    run_git_passthrough,
)

# Diff utilities
from gity.git.diff import (
    get_staged_diff,
    has_unstaged_changes,
)

# Commit execution
from gity.git.commit import commit_with_message

# Remote utilities
from gity.git.remote import (
    get_remote_url,
    get_repo_browser_url,
    git_url_to_browser_url,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    "CommitError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    "run_git_passthrough",
    # Diff
    "get_staged_diff",
    "has_unstaged_changes",
    # Commit
    "commit_with_message",
    # Remote
    "get_remote_url",
    "git_url_to_browser_url",
    "get_repo_browser_url",
]
