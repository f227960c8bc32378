"""CLI entry point for gity.

This module provides the main CLI application that combines all commands
into a single unified interface.
"""

import typer

from gity.cli.config import config_app
from gity.cli.group import GitFallbackGroup
from gity.cli.main import main_command
from gity.cli.tools import (
    GIT_PASSTHROUGH_COMMAND,
    completion_command,
    git_passthrough_command,
    help_command,
    menu_command,
    open_command,
)

# Main application
app = typer.Typer(
    name="gity",
    cls=GitFallbackGroup,
    help="Gity: Git with AI-powered commit messages",
    epilog=(
        "Environment: OPENAI_API_KEY, ANTHROPIC_API_KEY, LLM_PROVIDER "
        "(default: openai), LLM_MODEL, LLM_MAX_TOKENS. "
        "Any other command is passed through to git."
    ),
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("open")(open_command)
app.command("completion")(completion_command)
app.command("menu")(menu_command)
app.command("help")(help_command)
app.command(
    GIT_PASSTHROUGH_COMMAND,
    hidden=True,
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
)(git_passthrough_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
    "open_command",
    "completion_command",
    "menu_command",
    "help_command",
    "git_passthrough_command",
]
