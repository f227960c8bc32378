"""Gity: AI-generated Git commit messages for staged changes."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gity")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
