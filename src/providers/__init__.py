"""LLM providers used for product-specific action guidance."""
from __future__ import annotations

import os
from typing import Optional

from providers.base import LLMMessage, LLMProvider, LLMRequest, LLMResponse, LLMUsage
from utils.error_handler import AuthenticationError, ErrorCategory, LaunchReadyError, handle_provider_error

PROVIDER_NAMES = ("anthropic", "none")


def get_provider(name: str, model: Optional[str] = None) -> Optional[LLMProvider]:
    """Build a provider by name. ``"none"`` returns None (deterministic mode).

    Raises:
        AuthenticationError: anthropic requested without ANTHROPIC_API_KEY.
        ProviderError: the provider client could not be constructed.
        LaunchReadyError: unknown provider name.
    """
    if name == "none":
        return None
    if name == "anthropic":
        if not os.getenv("ANTHROPIC_API_KEY"):
            raise AuthenticationError()
        from providers.anthropic import AnthropicProvider

        try:
            return AnthropicProvider(model=model)
        except LaunchReadyError:
            raise
        except Exception as exc:
            raise handle_provider_error(exc) from exc
    raise LaunchReadyError(
        category=ErrorCategory.CONFIG,
        message=f'Unknown provider "{name}"',
        details=f"Expected one of: {', '.join(PROVIDER_NAMES)}",
    )


__all__ = [
    "LLMMessage",
    "LLMProvider",
    "LLMRequest",
    "LLMResponse",
    "LLMUsage",
    "PROVIDER_NAMES",
    "get_provider",
]
