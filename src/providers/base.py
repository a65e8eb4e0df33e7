"""LLM provider seam.

A provider turns one LLMRequest into one LLMResponse. Failures are raised
as ProviderError; callers that must keep going catch it per request.
"""
from __future__ import annotations

from typing import List, Literal, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field

DEFAULT_MAX_TOKENS = 4096
DEFAULT_TEMPERATURE = 0.3


class LLMMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class LLMRequest(BaseModel):
    messages: List[LLMMessage]
    system_prompt: Optional[str] = None
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE

    @classmethod
    def from_prompt(cls, prompt: str, **kwargs) -> LLMRequest:
        return cls(messages=[LLMMessage(role="user", content=prompt)], **kwargs)


class LLMUsage(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0


class LLMResponse(BaseModel):
    content: str
    usage: LLMUsage = Field(default_factory=LLMUsage)


@runtime_checkable
class LLMProvider(Protocol):
    id: str
    name: str

    def complete(self, request: LLMRequest) -> LLMResponse:
        ...
