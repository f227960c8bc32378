"""LLM provider module for gity.

This module provides a unified interface to the supported LLM providers.
Adding a provider means adding a BaseLLMProvider subclass and one
PROVIDER_REGISTRY entry.
"""

from typing import Optional

from gity.config import LLMProvider, ProviderConfig, resolve_provider_id
from gity.llm.anthropic_provider import AnthropicProvider
from gity.llm.base import (
    FALLBACK_COMMIT_MESSAGE,
    BaseLLMProvider,
    clean_llm_response,
)
from gity.llm.exceptions import LLMError, MissingAPIKeyError
from gity.llm.openai_provider import OpenAIProvider

PROVIDER_REGISTRY: dict[LLMProvider, type[BaseLLMProvider]] = {
    LLMProvider.OPENAI: OpenAIProvider,
    LLMProvider.ANTHROPIC: AnthropicProvider,
}


def get_provider(identifier: Optional[str] = None) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        identifier: Case-insensitive provider name. Unknown names resolve
            to the default provider instead of failing.

    Returns:
        An instance of the appropriate LLM provider.
    """
    return PROVIDER_REGISTRY[resolve_provider_id(identifier)]()


def generate_commit(diff: str, identifier: Optional[str], config: ProviderConfig) -> str:
    """Generate a commit message with the provider named by identifier.

    Args:
        diff: The staged diff text.
        identifier: Provider name.
        config: Provider configuration.

    Returns:
        The commit message, or FALLBACK_COMMIT_MESSAGE on provider failure.

    Raises:
        MissingAPIKeyError: If config.api_key is not set.
    """
    return get_provider(identifier).generate_commit(diff, config)


__all__ = [
    "BaseLLMProvider",
    "OpenAIProvider",
    "AnthropicProvider",
    "LLMError",
    "MissingAPIKeyError",
    "FALLBACK_COMMIT_MESSAGE",
    "PROVIDER_REGISTRY",
    "clean_llm_response",
    "get_provider",
    "generate_commit",
]
