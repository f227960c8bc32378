"""OpenAI GPT provider implementation."""

from typing import Optional

from openai import OpenAI

from gity.config import DEFAULT_MODELS, LLMProvider, ProviderConfig
from gity.llm.base import SYSTEM_PROMPT, BaseLLMProvider


class OpenAIProvider(BaseLLMProvider):
    """OpenAI chat completions provider (bearer token auth)."""

    name = "OpenAI"
    default_model = DEFAULT_MODELS[LLMProvider.OPENAI]

    def _request_completion(self, diff: str, config: ProviderConfig) -> Optional[str]:
        # Retries are left to the user via "regenerate"
        client = OpenAI(api_key=config.api_key, max_retries=0)

        response = client.chat.completions.create(
            model=self.resolve_model(config),
            max_tokens=self.resolve_max_tokens(config),
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": self.build_user_prompt(diff)},
            ],
        )

        if not response.choices:
            return None
        return response.choices[0].message.content
