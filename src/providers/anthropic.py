"""Anthropic Claude provider."""
from __future__ import annotations

from typing import Optional

import structlog

from config.loader import get_llm_model
from providers.base import LLMRequest, LLMResponse, LLMUsage
from utils.error_handler import InvalidResponseError, handle_provider_error
from utils.llm_client import get_anthropic_client

logger = structlog.get_logger(__name__)


class AnthropicProvider:
    """Single-turn completions through the Anthropic Messages API."""

    id = "anthropic"
    name = "Anthropic Claude"

    def __init__(self, model: Optional[str] = None, api_key: Optional[str] = None, client=None):
        self.model = model or get_llm_model()
        self._client = client or get_anthropic_client(api_key)

    def complete(self, request: LLMRequest) -> LLMResponse:
        kwargs = {
            "model": self.model,
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
            "messages": [m.model_dump() for m in request.messages],
        }
        if request.system_prompt:
            kwargs["system"] = request.system_prompt

        try:
            response = self._client.messages.create(**kwargs)
        except Exception as exc:
            raise handle_provider_error(exc) from exc

        if not response.content:
            raise InvalidResponseError("missing content")
        text = getattr(response.content[0], "text", None)
        if text is None:
            raise InvalidResponseError("missing text in content block")

        usage = response.usage
        logger.debug(
            "llm_call_completed",
            provider=self.id,
            model=self.model,
            input_tokens=usage.input_tokens if usage else 0,
            output_tokens=usage.output_tokens if usage else 0,
        )
        return LLMResponse(
            content=text,
            usage=LLMUsage(
                input_tokens=usage.input_tokens if usage else 0,
                output_tokens=usage.output_tokens if usage else 0,
            ),
        )
