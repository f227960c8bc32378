"""CLI commands for global configuration management."""

import typer

from gity import global_config
from gity.config import LLMProvider

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global gity configuration in ~/.gity/",
    add_completion=False,
)

VALID_PROVIDERS = ", ".join(p.value for p in LLMProvider)


def show_config() -> None:
    """Print the contents of ~/.gity/config.yaml."""
    if not global_config.is_configured():
        typer.echo("No configuration file found (~/.gity/config.yaml).")
        typer.echo("Environment variables and built-in defaults are used.")
        return

    config = global_config.load_global_config()

    typer.echo("Current gity configuration (~/.gity/config.yaml):")
    typer.echo()
    typer.echo(f"  Provider: {config.get('provider', 'not set')}")
    typer.echo(f"  Model: {config.get('model', 'not set')}")
    typer.echo(f"  Max Tokens: {config.get('max_tokens', 'not set')}")
    typer.echo(f"  Editor: {config.get('editor', 'not set')}")


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        show_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        ...,
        help=f"Config key ({', '.join(global_config.CONFIG_KEYS)})",
    ),
    value: str = typer.Argument(..., help="Value to store"),
) -> None:
    """Set a value in the global configuration."""
    key = key.lower()
    stored: object = value

    if key == "provider":
        try:
            stored = LLMProvider(value.lower()).value
        except ValueError:
            typer.echo(f"Invalid provider: {value}", err=True)
            typer.echo(f"Valid providers: {VALID_PROVIDERS}")
            raise typer.Exit(1)
    elif key == "max_tokens":
        if not value.isdigit() or int(value) <= 0:
            typer.echo(f"Invalid max_tokens: {value} (expected a positive integer)", err=True)
            raise typer.Exit(1)
        stored = int(value)

    try:
        global_config.set_value(key, stored)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to {stored}")
