"""Interactive commit-message session.

One session is bound to one captured diff. It asks the provider for a
message, then loops on a single-line prompt until the user confirms
(commit) or quits:

    PROMPTING --""/other--> CONFIRMED    (commit, exit 0)
    PROMPTING --"e"-------> EDITING      -> PROMPTING
    PROMPTING --"r"-------> REGENERATING -> PROMPTING
    PROMPTING --"q"-------> CANCELLED    (no commit, exit 0)
"""

import os
import tempfile
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import typer

from gity.config import ProviderConfig, get_api_key_env_var
from gity.editor import open_editor
from gity.git import (
    GitError,
    NoStagedChangesError,
    commit_with_message,
    get_staged_diff,
    has_unstaged_changes,
)
from gity.llm import BaseLLMProvider, LLMError, get_provider

PROMPT_TEXT = "(Enter = confirm, e = edit, r = regenerate, q = quit) > "

TEMP_FILE_PREFIX = "gity_msg_"


class SessionState(Enum):
    """States of the commit session loop."""

    PROMPTING = "prompting"
    EDITING = "editing"
    REGENERATING = "regenerating"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


# Anything not listed here confirms, like a bare Enter
_CHOICES = {
    "e": SessionState.EDITING,
    "r": SessionState.REGENERATING,
    "q": SessionState.CANCELLED,
}


def parse_choice(answer: str) -> SessionState:
    """Map one line of user input to the next session state.

    Surrounding whitespace is ignored, so " q " cancels. Matching is
    case-sensitive: "E" or "Q" confirms like any other unlisted input.
    """
    return _CHOICES.get(answer.strip(), SessionState.CONFIRMED)


def read_user_input(prompt_text: str) -> str:
    """Read one line from the terminal; an empty line returns ""."""
    return typer.prompt(prompt_text, default="", show_default=False, prompt_suffix="")


class CommitSession:
    """State machine driving one accept/edit/regenerate/quit loop.

    Attributes:
        provider: The LLM provider used for every generation.
        config: The provider configuration.
        diff: The staged diff captured when the session started.
        message: The current candidate commit message.
        state: The current SessionState.
    """

    def __init__(
        self,
        provider: BaseLLMProvider,
        config: ProviderConfig,
        diff: str,
        committer: Optional[Callable[[str], None]] = None,
        editor: Optional[Callable[[Path], None]] = None,
        read_input: Optional[Callable[[str], str]] = None,
    ):
        self.provider = provider
        self.config = config
        self.diff = diff
        self.committer = committer or commit_with_message
        self.editor = editor or open_editor
        self.read_input = read_input or read_user_input
        self.message: Optional[str] = None
        self.state = SessionState.PROMPTING

    def generate(self) -> str:
        """Replace the current message with a fresh provider result."""
        self.message = self.provider.generate_commit(self.diff, self.config)
        return self.message

    def show(self, heading: str) -> None:
        """Display the current message under a heading."""
        typer.echo("")
        typer.echo(heading)
        typer.echo("")
        typer.echo(f'"{self.message}"')
        typer.echo("")

    def prompt(self) -> SessionState:
        """Wait for one line of input and move to the chosen state."""
        self.state = parse_choice(self.read_input(PROMPT_TEXT))
        return self.state

    def edit(self) -> None:
        """Let the user rewrite the message in their external editor.

        The temporary file is removed even when the editor or the read fails.
        """
        fd, name = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX, suffix=".txt")
        temp_file = Path(name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(self.message or "")
            self.editor(temp_file)
            self.message = temp_file.read_text(encoding="utf-8").strip()
        finally:
            temp_file.unlink(missing_ok=True)

        self.show("Updated commit message:")
        self.state = SessionState.PROMPTING

    def regenerate(self) -> None:
        """Ask the provider again for the same diff."""
        self.generate()
        self.show("New suggested commit message:")
        self.state = SessionState.PROMPTING

    def confirm(self) -> None:
        """Commit with the current message."""
        self.committer(self.message)

    def run(self) -> int:
        """Generate the first message and run the loop to completion.

        Returns:
            0 after a commit or a cancel, 1 on any fatal error.
        """
        if self.message is None:
            try:
                self.generate()
            except LLMError as e:
                typer.echo(f"Error generating commit message: {e}", err=True)
                return 1
            self.show("Suggested commit message:")

        while True:
            try:
                state = self.prompt()
            except typer.Abort:
                typer.echo("", err=True)
                typer.echo("Commit canceled.", err=True)
                return 1

            try:
                if state is SessionState.EDITING:
                    self.edit()
                elif state is SessionState.REGENERATING:
                    self.regenerate()
                elif state is SessionState.CANCELLED:
                    typer.echo("Commit canceled.")
                    return 0
                else:
                    self.confirm()
                    typer.echo("Commit successful.")
                    return 0
            except Exception as e:
                typer.echo(f"Error: {e}", err=True)
                return 1


def _acquire_diff(diff_source: Callable[[], str]) -> str:
    """Read the staged diff, rejecting a blank one."""
    diff = diff_source()
    if not diff.strip():
        raise NoStagedChangesError("No staged changes found.")
    return diff


def run_commit_session(
    provider_id: Optional[str],
    config: ProviderConfig,
    diff_source: Optional[Callable[[], str]] = None,
    unstaged_check: Optional[Callable[[], bool]] = None,
    committer: Optional[Callable[[str], None]] = None,
    editor: Optional[Callable[[Path], None]] = None,
    read_input: Optional[Callable[[str], str]] = None,
) -> int:
    """Run one interactive commit session.

    Collaborators left as None use the real git, editor and terminal.

    Args:
        provider_id: Provider name; unknown names use the default provider.
        config: Provider configuration assembled at the CLI boundary.
        diff_source: Returns the staged diff. Defaults to get_staged_diff.
        unstaged_check: Reports whether unstaged changes exist (for hints).
        committer: Commits with a message, raising on failure.
        editor: Opens a file in the user's editor and blocks until it exits.
        read_input: Reads one line of user input given a prompt.

    Returns:
        Process exit code: 0 on commit or cancel, 1 on a fatal error.
    """
    diff_source = diff_source or get_staged_diff
    unstaged_check = unstaged_check or has_unstaged_changes

    if not config.api_key:
        typer.echo(f'API key not found for provider "{provider_id}".', err=True)
        typer.echo(
            f"Set {get_api_key_env_var(provider_id)} in your environment variables.",
            err=True,
        )
        return 1

    try:
        diff = _acquire_diff(diff_source)
    except NoStagedChangesError as e:
        typer.echo(str(e), err=True)
        try:
            if unstaged_check():
                typer.echo("There are unstaged changes.", err=True)
                typer.echo(
                    "Use 'git add <file>' to stage the changes you want to commit.",
                    err=True,
                )
        except GitError:
            pass
        return 1
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        typer.echo("Ensure you have Git installed and changes staged.", err=True)
        return 1

    session = CommitSession(
        provider=get_provider(provider_id),
        config=config,
        diff=diff,
        committer=committer,
        editor=editor,
        read_input=read_input,
    )
    return session.run()
