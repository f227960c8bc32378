"""External editor launcher."""

import os
import shlex
import subprocess
from pathlib import Path
from typing import Optional

import typer

from gity import global_config

DEFAULT_EDITOR = "vim"


class EditorError(Exception):
    """Raised when the external editor cannot be launched."""

    pass


def find_editor(preference: Optional[str] = None) -> list[str]:
    """Find the editor command to run.

    Preference order:
    1. The explicit preference argument
    2. $EDITOR environment variable
    3. editor key in ~/.gity/config.yaml
    4. vim as fallback

    Returns:
        List of command parts to run the editor.
    """
    editor = preference or os.environ.get("EDITOR")
    if not editor:
        try:
            editor = global_config.get_editor_preference()
        except global_config.GlobalConfigError:
            editor = None

    parts = shlex.split(editor) if editor else []
    return parts or [DEFAULT_EDITOR]


def open_editor(file_path: Path, preference: Optional[str] = None) -> None:
    """Open the file in an editor and wait for it to close.

    Args:
        file_path: Path to the file to edit.
        preference: Editor command overriding the environment.

    Raises:
        EditorError: If the editor executable cannot be started.
    """
    editor_cmd = find_editor(preference)

    try:
        result = subprocess.run(editor_cmd + [str(file_path)], check=False)
    except (FileNotFoundError, PermissionError) as e:
        raise EditorError(f"Editor not found: {editor_cmd[0]} ({e})")

    if result.returncode != 0:
        typer.echo(f"Warning: Editor exited with code {result.returncode}", err=True)
