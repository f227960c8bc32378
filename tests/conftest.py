"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from gity.config import ProviderConfig
from gity.llm.base import BaseLLMProvider


class ScriptedProvider(BaseLLMProvider):
    """Provider returning (or raising) queued responses instead of calling an API."""

    name = "Scripted"
    default_model = "scripted-model"

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def _request_completion(self, diff, config):
        self.calls.append(diff)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


class ScriptedInput:
    """Callable returning queued answers for prompts, recording each prompt."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt_text):
        self.prompts.append(prompt_text)
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def provider_config():
    """ProviderConfig with an API key and no overrides."""
    return ProviderConfig(api_key="test-key")


@pytest.fixture
def sample_diff():
    """Sample staged diff for testing."""
    return """diff --git a/foo.py b/foo.py
index 1234567..abcdefg 100644
--- a/foo.py
+++ b/foo.py
@@ -1,2 +1,5 @@
 def main():
     pass
+
+def foo():
+    return 42
"""


@pytest.fixture
def scripted_provider():
    """Factory for ScriptedProvider instances."""
    return ScriptedProvider


@pytest.fixture
def scripted_input():
    """Factory for ScriptedInput instances."""
    return ScriptedInput


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
