"""Anthropic Claude provider implementation."""

from typing import Optional

from anthropic import Anthropic

from gity.config import DEFAULT_MODELS, LLMProvider, ProviderConfig
from gity.llm.base import SYSTEM_PROMPT, BaseLLMProvider


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude messages provider (x-api-key plus version header)."""

    name = "Anthropic"
    default_model = DEFAULT_MODELS[LLMProvider.ANTHROPIC]

    def _request_completion(self, diff: str, config: ProviderConfig) -> Optional[str]:
        # The SDK sends x-api-key and anthropic-version; retries are left to the user
        client = Anthropic(api_key=config.api_key, max_retries=0)

        message = client.messages.create(
            model=self.resolve_model(config),
            max_tokens=self.resolve_max_tokens(config),
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": self.build_user_prompt(diff)}],
        )

        if not message.content:
            return None
        return getattr(message.content[0], "text", None)
