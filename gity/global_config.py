"""Global configuration management for gity.

Handles user-level configuration stored in ~/.gity/config.yaml:
provider, model, max_tokens and editor preferences.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".gity"

CONFIG_KEYS = ("provider", "model", "max_tokens", "editor")


def get_global_config_dir() -> Path:
    """Get the global gity configuration directory.

    Returns:
        Path to ~/.gity/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.gity/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.gity/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a YAML mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.gity/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    config_file = get_config_file_path()

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def get_editor_preference() -> Optional[str]:
    """Get the user's preferred editor command, or None if not set."""
    return load_global_config().get("editor")


def set_value(key: str, value: Any) -> None:
    """Set a single configuration key and persist the file.

    Args:
        key: One of CONFIG_KEYS.
        value: The value to store.

    Raises:
        GlobalConfigError: If the key is not a known configuration key.
    """
    if key not in CONFIG_KEYS:
        raise GlobalConfigError(
            f"Unknown config key: {key}. Valid keys: {', '.join(CONFIG_KEYS)}"
        )
    config = load_global_config()
    config[key] = value
    save_global_config(config)


def is_configured() -> bool:
    """Check if a global config file exists."""
    return get_config_file_path().exists()
