"""Tests for provider selection and the Anthropic adapter."""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from providers import get_provider
from providers.anthropic import AnthropicProvider
from providers.base import LLMProvider, LLMRequest
from utils.error_handler import (
    AuthenticationError,
    ErrorCategory,
    InvalidResponseError,
    LaunchReadyError,
    OverloadedError,
    ProviderError,
)
from utils.llm_client import get_anthropic_client, ssl_verification_enabled


class FakeMessages:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def _client(response=None, error=None):
    return SimpleNamespace(messages=FakeMessages(response, error))


def _response(text="Guidance", input_tokens=12, output_tokens=34):
    return SimpleNamespace(
        content=[SimpleNamespace(text=text)],
        usage=SimpleNamespace(input_tokens=input_tokens, output_tokens=output_tokens),
    )


class TestGetProvider:
    def test_none_means_deterministic(self):
        assert get_provider("none") is None

    def test_anthropic_requires_key(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        with pytest.raises(AuthenticationError):
            get_provider("anthropic")

    def test_unknown_name(self):
        with pytest.raises(LaunchReadyError) as exc_info:
            get_provider("openai")
        assert exc_info.value.category == ErrorCategory.CONFIG


class TestAnthropicProvider:
    """Tests for AnthropicProvider.complete against a fake SDK client."""

    def test_satisfies_protocol(self):
        assert isinstance(AnthropicProvider(model="m", client=_client()), LLMProvider)

    def test_complete_maps_request_and_usage(self):
        client = _client(_response())
        provider = AnthropicProvider(model="test-model", client=client)
        request = LLMRequest.from_prompt("Hello", system_prompt="Be brief", max_tokens=100, temperature=0.1)

        response = provider.complete(request)

        assert response.content == "Guidance"
        assert response.usage.input_tokens == 12
        assert response.usage.output_tokens == 34
        call = client.messages.calls[0]
        assert call["model"] == "test-model"
        assert call["max_tokens"] == 100
        assert call["temperature"] == 0.1
        assert call["system"] == "Be brief"
        assert call["messages"] == [{"role": "user", "content": "Hello"}]

    def test_no_system_prompt_omits_system(self):
        client = _client(_response())
        AnthropicProvider(model="m", client=client).complete(LLMRequest.from_prompt("Hi"))
        assert "system" not in client.messages.calls[0]

    def test_sdk_errors_are_typed(self):
        client = _client(error=RuntimeError("Error code: 529 - overloaded"))
        with pytest.raises(OverloadedError):
            AnthropicProvider(model="m", client=client).complete(LLMRequest.from_prompt("Hi"))

    def test_empty_content_is_invalid(self):
        client = _client(SimpleNamespace(content=[], usage=None))
        with pytest.raises(InvalidResponseError):
            AnthropicProvider(model="m", client=client).complete(LLMRequest.from_prompt("Hi"))


class TestAnthropicClient:
    def test_client_uses_configured_transport(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_VERIFY_SSL", raising=False)
        client = get_anthropic_client("test-key")
        assert client.api_key == "test-key"
        assert client.max_retries == 2

    def test_ssl_toggle(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_VERIFY_SSL", "TRUE")
        assert ssl_verification_enabled()
        monkeypatch.setenv("ANTHROPIC_VERIFY_SSL", "no")
        assert not ssl_verification_enabled()


class TestProviderConstruction:
    """Client construction failures surface as typed errors."""

    def test_anthropic_client_failure_is_typed(self, monkeypatch):
        def _broken_client(api_key=None):
            raise TypeError("Invalid http_client argument")

        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        monkeypatch.setattr("providers.anthropic.get_anthropic_client", _broken_client)

        with pytest.raises(ProviderError) as exc_info:
            get_provider("anthropic")
        assert exc_info.value.category == ErrorCategory.LLM_PROVIDER
        assert exc_info.value.error_type == "TypeError"

    def test_anthropic_provider_builds_with_ssl_off(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        monkeypatch.delenv("ANTHROPIC_VERIFY_SSL", raising=False)
        provider = get_provider("anthropic", model="test-model")
        assert provider.id == "anthropic"
        assert provider.model == "test-model"
