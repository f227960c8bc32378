"""Base class and shared utilities for LLM providers."""

from abc import ABC, abstractmethod
from typing import Optional

import typer

from gity.config import DEFAULT_MAX_TOKENS, ProviderConfig
from gity.llm.exceptions import MissingAPIKeyError

# Returned whenever a provider call fails, so the session always has a candidate
FALLBACK_COMMIT_MESSAGE = "chore: update code"

# System prompt for the LLM (shared across all providers)
SYSTEM_PROMPT = (
    "You are an AI that generates concise and meaningful Git commit messages "
    "based on code changes."
)

# User prompt template (shared across all providers)
USER_PROMPT_TEMPLATE = "Generate a commit message for the following code changes:\n\n{diff}"


def clean_llm_response(text: str) -> str:
    """Remove a single pair of double quotes wrapping the whole response.

    Args:
        text: The raw text response from the LLM.

    Returns:
        The text without surrounding double quotes.
    """
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers.

    Subclasses implement a single request in _request_completion();
    generate_commit() wraps it with the API key check, the fallback
    policy and response cleanup shared by every provider.
    """

    name: str = ""
    default_model: str = ""

    def resolve_model(self, config: ProviderConfig) -> str:
        """Get the model to use, preferring the configured override."""
        return config.model or self.default_model

    def resolve_max_tokens(self, config: ProviderConfig) -> int:
        """Get the completion token limit, preferring the configured override."""
        return config.max_tokens or DEFAULT_MAX_TOKENS

    def build_user_prompt(self, diff: str) -> str:
        """Build the user prompt for a diff.

        Args:
            diff: The staged diff text.

        Returns:
            The formatted user prompt.
        """
        return USER_PROMPT_TEMPLATE.format(diff=diff)

    @abstractmethod
    def _request_completion(self, diff: str, config: ProviderConfig) -> Optional[str]:
        """Send exactly one completion request and return the raw text.

        Args:
            diff: The staged diff text.
            config: Provider configuration with a non-empty api_key.

        Returns:
            The raw completion text, or None if the response had none.
        """
        pass

    def generate_commit(self, diff: str, config: ProviderConfig) -> str:
        """Generate a commit message for a diff.

        Request failures never propagate: the cause is reported on stderr
        and FALLBACK_COMMIT_MESSAGE is returned instead.

        Args:
            diff: The staged diff text (may be empty).
            config: Provider configuration.

        Returns:
            The commit message without wrapping double quotes.

        Raises:
            MissingAPIKeyError: If config.api_key is not set.
        """
        if not config.api_key:
            raise MissingAPIKeyError(f"API key is required for {self.name} provider")

        try:
            content = self._request_completion(diff, config)
        except Exception as e:
            typer.echo(f"Failed to generate commit message: {e}", err=True)
            return FALLBACK_COMMIT_MESSAGE

        if not content:
            typer.echo(
                f"Failed to generate commit message: empty response from {self.name}",
                err=True,
            )
            return FALLBACK_COMMIT_MESSAGE

        return clean_llm_response(content)
