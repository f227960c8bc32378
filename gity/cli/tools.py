"""Auxiliary CLI commands: open, completion, menu, help and git passthrough."""

from typing import Optional

import typer

from gity.cli.config import show_config
from gity.completion import (
    SUPPORTED_SHELLS,
    completion_setup_hint,
    detect_shell,
    generate_completion_script,
    install_completion_script,
    select_command,
)
from gity.git import GitError, get_repo_browser_url, get_repo_root, run_git_passthrough
from gity.global_config import GlobalConfigError
from gity.session import read_user_input

# Hidden command receiving every argument list that names no gity command
GIT_PASSTHROUGH_COMMAND = "git"


def open_repository() -> None:
    """Open the origin remote of the current repository in the browser."""
    try:
        get_repo_root()
        url = get_repo_browser_url()
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Opening repository: {url}")
    if typer.launch(url) != 0:
        typer.echo("Error opening browser.", err=True)
        raise typer.Exit(1)
    typer.echo("Repository opened in browser.")


def install_completion(shell: Optional[str] = None) -> None:
    """Install the completion script and print setup instructions."""
    shell = shell or detect_shell()
    try:
        path = install_completion_script(shell)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Supported shells: {', '.join(SUPPORTED_SHELLS)}")
        raise typer.Exit(1)
    except OSError as e:
        typer.echo(f"Failed to install completion script: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {shell} completion installed to {path}")
    for line in completion_setup_hint(shell):
        typer.echo(line)


def open_command() -> None:
    """Open the current repository in the browser."""
    open_repository()


def completion_command(
    shell: Optional[str] = typer.Option(
        None,
        "--shell",
        "-s",
        help="Target shell (zsh, bash). Detected from $SHELL by default",
    ),
    print_only: bool = typer.Option(
        False,
        "--print",
        help="Print the completion script instead of installing it",
    ),
) -> None:
    """Install shell completion for TAB completion."""
    if not print_only:
        install_completion(shell)
        return

    try:
        typer.echo(generate_completion_script(shell or detect_shell()), nl=False)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def help_command(ctx: typer.Context) -> None:
    """Show help information."""
    typer.echo(ctx.parent.get_help())


def menu_command(ctx: typer.Context) -> None:
    """Select a command from an interactive menu."""
    selected = select_command(read_user_input)
    if selected is None:
        return

    typer.echo(f"Selected: {selected}")
    if selected == "open":
        open_repository()
    elif selected == "completion":
        install_completion()
    elif selected == "config":
        try:
            show_config()
        except GlobalConfigError as e:
            typer.echo(f"Error reading configuration: {e}", err=True)
            raise typer.Exit(1)
    elif selected == "menu":
        menu_command(ctx)
    else:
        help_command(ctx)


def git_passthrough_command(ctx: typer.Context) -> None:
    """Run any other git command, e.g. `gity status`."""
    try:
        exit_code = run_git_passthrough(list(ctx.args))
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    raise typer.Exit(exit_code)
