"""Tests for gity.llm.base module."""

import pytest

from gity.config import ProviderConfig
from gity.llm.base import (
    FALLBACK_COMMIT_MESSAGE,
    SYSTEM_PROMPT,
    USER_PROMPT_TEMPLATE,
    clean_llm_response,
)
from gity.llm.exceptions import LLMError, MissingAPIKeyError


class TestExceptions:
    """Tests for LLM exception classes."""

    def test_llm_error_is_exception(self):
        """Test that LLMError is an Exception."""
        assert isinstance(LLMError("test error"), Exception)

    def test_missing_api_key_is_llm_error(self):
        """Test that MissingAPIKeyError is an LLMError."""
        assert isinstance(MissingAPIKeyError("missing key"), LLMError)


class TestPrompts:
    """Tests for shared prompt constants."""

    def test_fallback_message(self):
        """Test the fixed fallback literal."""
        assert FALLBACK_COMMIT_MESSAGE == "chore: update code"

    def test_system_prompt_mentions_commit_messages(self):
        """Test the system prompt content."""
        assert "commit messages" in SYSTEM_PROMPT

    def test_user_prompt_embeds_diff(self):
        """Test that the user prompt template places the diff last."""
        prompt = USER_PROMPT_TEMPLATE.format(diff="+ add foo()")
        assert prompt.endswith("\n\n+ add foo()")


class TestCleanLLMResponse:
    """Tests for clean_llm_response."""

    @pytest.mark.parametrize("raw,expected", [
        ('"feat: add foo function"', "feat: add foo function"),
        ("feat: add foo function", "feat: add foo function"),
        ('""feat""', '"feat"'),
        ('"unbalanced', '"unbalanced'),
        ('unbalanced"', 'unbalanced"'),
        ('fix: handle "quoted" word', 'fix: handle "quoted" word'),
        ('""', ""),
        ('"', '"'),
        ("", ""),
    ])
    def test_strips_single_wrapping_pair(self, raw, expected):
        """Test that exactly one wrapping pair of double quotes is removed."""
        assert clean_llm_response(raw) == expected


class TestGenerateCommit:
    """Tests for BaseLLMProvider.generate_commit."""

    def test_returns_cleaned_response(self, scripted_provider, provider_config):
        """Test that a successful response is returned without quotes."""
        provider = scripted_provider(['"feat: add foo function"'])

        assert provider.generate_commit("+ add foo()", provider_config) == "feat: add foo function"
        assert provider.calls == ["+ add foo()"]

    def test_missing_api_key_raises(self, scripted_provider):
        """Test that generation without a key fails before any request."""
        provider = scripted_provider(["feat: x"])

        with pytest.raises(MissingAPIKeyError) as exc_info:
            provider.generate_commit("diff", ProviderConfig())

        assert "API key" in str(exc_info.value)
        assert provider.calls == []

    def test_request_failure_returns_fallback(self, scripted_provider, provider_config, capsys):
        """Test that exceptions become the fallback message and are reported."""
        provider = scripted_provider([ConnectionError("connection refused")])

        result = provider.generate_commit("diff", provider_config)

        assert result == FALLBACK_COMMIT_MESSAGE
        captured = capsys.readouterr()
        assert "connection refused" in captured.err
        assert captured.out == ""

    @pytest.mark.parametrize("content", [None, ""])
    def test_empty_response_returns_fallback(self, scripted_provider, provider_config, content):
        """Test that an empty completion becomes the fallback message."""
        provider = scripted_provider([content])

        assert provider.generate_commit("diff", provider_config) == FALLBACK_COMMIT_MESSAGE

    def test_empty_diff_still_calls_provider(self, scripted_provider, provider_config):
        """Test that an empty diff does not crash the provider."""
        provider = scripted_provider(["chore: nothing"])

        assert provider.generate_commit("", provider_config) == "chore: nothing"
        assert provider.calls == [""]

    def test_resolve_model_and_tokens(self, scripted_provider):
        """Test config overrides against provider defaults."""
        provider = scripted_provider(["x"])

        assert provider.resolve_model(ProviderConfig()) == "scripted-model"
        assert provider.resolve_model(ProviderConfig(model="custom")) == "custom"
        assert provider.resolve_max_tokens(ProviderConfig()) == 50
        assert provider.resolve_max_tokens(ProviderConfig(max_tokens=200)) == 200
