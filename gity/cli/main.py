"""Main CLI command for generating a commit message and committing."""

from typing import Optional

import typer

from gity import __version__
from gity.config import ConfigError, load_settings
from gity.global_config import GlobalConfigError
from gity.session import run_commit_session


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gity {__version__}")
        raise typer.Exit(0)


def main_command(
    ctx: typer.Context,
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help="LLM provider to use (openai, anthropic). Overrides LLM_PROVIDER",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to use with the provider. Overrides LLM_MODEL",
    ),
    max_tokens: Optional[int] = typer.Option(
        None,
        "--max-tokens",
        min=1,
        help="Maximum tokens for the response. Overrides LLM_MAX_TOKENS",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate an AI commit message for staged changes and commit it."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        provider_id, config = load_settings(
            provider=provider,
            model=model,
            max_tokens=max_tokens,
        )
    except (ConfigError, GlobalConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Analyzing staged changes using {provider_id}...")
    raise typer.Exit(run_commit_session(provider_id, config))
