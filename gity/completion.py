"""Shell completion scripts and the interactive command menu."""

import os
from pathlib import Path
from typing import Callable, Mapping, Optional

import typer

# Commands offered by completion and by `gity menu`
GITY_COMMANDS = [
    ("open", "Open the current repository in browser"),
    ("help", "Show help information"),
    ("completion", "Install shell completion"),
    ("menu", "Show interactive command selection menu"),
    ("config", "Show or change gity configuration"),
]

SUPPORTED_SHELLS = ("zsh", "bash")

_ZSH_TEMPLATE = """#compdef gity

_gity() {{
  local -a commands
  commands=(
{entries}
  )

  _describe 'command' commands
}}

_gity "$@"
"""

_BASH_TEMPLATE = """_gity() {{
  local cur
  COMPREPLY=()
  cur="${{COMP_WORDS[COMP_CWORD]}}"
  opts="{words} -h --help"

  COMPREPLY=( $(compgen -W "${{opts}}" -- "${{cur}}") )
  return 0
}}

complete -F _gity gity
"""


def generate_completion_script(shell: str = "zsh") -> str:
    """Generate a completion script for the given shell.

    Args:
        shell: "zsh" or "bash".

    Returns:
        The completion script text.

    Raises:
        ValueError: If the shell is not supported.
    """
    if shell == "zsh":
        entries = "\n".join(f'    "{name}:{description}"' for name, description in GITY_COMMANDS)
        return _ZSH_TEMPLATE.format(entries=entries)
    if shell == "bash":
        words = " ".join(name for name, _ in GITY_COMMANDS)
        return _BASH_TEMPLATE.format(words=words)
    raise ValueError(f"Unsupported shell: {shell}")


def detect_shell(environ: Optional[Mapping[str, str]] = None) -> str:
    """Detect the user's shell from $SHELL, defaulting to zsh."""
    environ = os.environ if environ is None else environ
    shell_path = environ.get("SHELL", "")
    return Path(shell_path).name or "zsh"


def get_completion_file(shell: str, home: Optional[Path] = None) -> Path:
    """Get the install location of the completion script for a shell.

    Raises:
        ValueError: If the shell is not supported.
    """
    home = home or Path.home()
    if shell == "zsh":
        return home / ".zsh" / "completion" / "_gity"
    if shell == "bash":
        return home / ".bash_completion.d" / "gity"
    raise ValueError(f"Unsupported shell: {shell}")


def install_completion_script(shell: Optional[str] = None, home: Optional[Path] = None) -> Path:
    """Write the completion script to the shell's completion directory.

    Args:
        shell: Target shell. Detected from $SHELL when None.
        home: Home directory. Defaults to the user's home.

    Returns:
        Path of the written script.

    Raises:
        ValueError: If the shell is not supported.
        OSError: If the file cannot be written.
    """
    shell = shell or detect_shell()
    script = generate_completion_script(shell)
    completion_file = get_completion_file(shell, home)

    completion_file.parent.mkdir(parents=True, exist_ok=True)
    completion_file.write_text(script)
    return completion_file


def completion_setup_hint(shell: str) -> list[str]:
    """Lines telling the user how to enable an installed script."""
    if shell == "zsh":
        return [
            "Add this to your ~/.zshrc if not already present:",
            "fpath=(~/.zsh/completion $fpath)",
            "autoload -U compinit && compinit",
        ]
    return [
        "Add this to your ~/.bashrc if not already present:",
        "source ~/.bash_completion.d/gity",
    ]


def select_command(read_input: Callable[[str], str]) -> Optional[str]:
    """Show a numbered menu of gity commands and return the chosen name.

    Args:
        read_input: Reads one line of input given a prompt.

    Returns:
        The selected command name, or None if the user cancelled.
    """
    typer.echo("")
    typer.echo("Select a gity command (number, Enter or q to cancel):")
    typer.echo("")
    for index, (name, description) in enumerate(GITY_COMMANDS, start=1):
        typer.echo(f"  {index}. {name.ljust(15)} {description}")
    typer.echo("")

    while True:
        answer = read_input("> ").strip().lower()
        if answer in ("", "q"):
            typer.echo("Cancelled")
            return None

        names = [name for name, _ in GITY_COMMANDS]
        if answer in names:
            return answer
        if answer.isdigit() and 1 <= int(answer) <= len(GITY_COMMANDS):
            return names[int(answer) - 1]

        typer.echo(f"Invalid selection: {answer}", err=True)
