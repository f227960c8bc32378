"""Configuration for gity LLM providers.

Settings are resolved once at the CLI boundary and handed to the commit
session as a provider identifier plus an immutable ProviderConfig.
Sources, highest precedence first:

1. Command-line options
2. Environment variables (a repo-level .env file is loaded first)
3. ~/.gity/config.yaml
4. The defaults below
"""

import os
from enum import Enum
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from gity import global_config


class LLMProvider(Enum):
    """Supported LLM providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


class ConfigError(Exception):
    """Raised when a configuration value is invalid."""

    pass


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_PROVIDER = LLMProvider.OPENAI
DEFAULT_MAX_TOKENS = 50

DEFAULT_MODELS = {
    LLMProvider.OPENAI: "gpt-4",
    LLMProvider.ANTHROPIC: "claude-3-haiku-20240307",
}

# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
}

PROVIDER_ENV_VAR = "LLM_PROVIDER"
MODEL_ENV_VAR = "LLM_MODEL"
MAX_TOKENS_ENV_VAR = "LLM_MAX_TOKENS"


class ProviderConfig(BaseModel):
    """Immutable settings passed to a provider for every generation call.

    Attributes:
        api_key: API key for the selected provider.
        model: Model override; the provider default is used when None.
        max_tokens: Completion token limit override; 50 when None.
    """

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    model: Optional[str] = None
    max_tokens: Optional[int] = None

    @field_validator("api_key", "model", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty or whitespace-only strings as unset."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("max_tokens")
    @classmethod
    def max_tokens_must_be_positive(cls, v: Optional[int]) -> Optional[int]:
        """Ensure max_tokens is a positive integer when provided."""
        if v is not None and v <= 0:
            raise ValueError("max_tokens must be a positive integer")
        return v


def resolve_provider_id(identifier: Optional[str]) -> LLMProvider:
    """Map a case-insensitive provider identifier to an LLMProvider.

    Unknown or empty identifiers resolve to DEFAULT_PROVIDER.

    Args:
        identifier: Provider name such as "openai" or "Anthropic".

    Returns:
        The matching LLMProvider.
    """
    if not identifier:
        return DEFAULT_PROVIDER
    try:
        return LLMProvider(identifier.strip().lower())
    except ValueError:
        return DEFAULT_PROVIDER


def get_api_key_env_var(identifier: Optional[str]) -> str:
    """Get the environment variable holding the API key for a provider.

    Args:
        identifier: Provider name (unknown names use the default provider).

    Returns:
        The environment variable name.
    """
    return API_KEY_ENV_VARS[resolve_provider_id(identifier)]


def _first_set(*values):
    """Return the first value that is neither None nor a blank string."""
    for value in values:
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def load_settings(
    provider: Optional[str] = None,
    model: Optional[str] = None,
    max_tokens: Optional[int] = None,
    environ: Optional[Mapping[str, str]] = None,
    file_config: Optional[dict] = None,
) -> tuple[str, ProviderConfig]:
    """Assemble the provider identifier and ProviderConfig.

    Args:
        provider: Provider override from the command line.
        model: Model override from the command line.
        max_tokens: Token limit override from the command line.
        environ: Environment mapping. Defaults to os.environ after loading .env.
        file_config: Parsed global config. Defaults to ~/.gity/config.yaml.

    Returns:
        A (provider_id, ProviderConfig) tuple.

    Raises:
        ConfigError: If a configured value is invalid.
        GlobalConfigError: If the global config file cannot be read.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ
    if file_config is None:
        file_config = global_config.load_global_config()

    provider_id = _first_set(
        provider,
        environ.get(PROVIDER_ENV_VAR),
        file_config.get("provider"),
    ) or DEFAULT_PROVIDER.value
    provider_id = str(provider_id).strip()

    try:
        config = ProviderConfig(
            api_key=environ.get(get_api_key_env_var(provider_id)),
            model=_first_set(model, environ.get(MODEL_ENV_VAR), file_config.get("model")),
            max_tokens=_first_set(
                max_tokens,
                environ.get(MAX_TOKENS_ENV_VAR),
                file_config.get("max_tokens"),
            ),
        )
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid LLM configuration: {errors}")

    return provider_id, config
