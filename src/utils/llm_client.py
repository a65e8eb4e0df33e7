"""Anthropic client construction.

One place decides SSL verification, timeouts and SDK retries so every
provider instance talks to the API the same way.
"""
from __future__ import annotations

import os

from anthropic import Anthropic, DefaultHttpxClient

import structlog

from config.loader import get_llm_max_retries, get_llm_timeout_seconds

logger = structlog.get_logger(__name__)


def ssl_verification_enabled() -> bool:
    """SSL verification is off unless ANTHROPIC_VERIFY_SSL=true (corporate proxies)."""
    return os.getenv("ANTHROPIC_VERIFY_SSL", "false").lower() == "true"


def get_anthropic_client(api_key: str | None = None) -> Anthropic:
    """Create an Anthropic client with the configured transport settings.

    The HTTP client comes from the SDK's own ``DefaultHttpxClient`` so it
    always matches the transport the installed SDK expects.

    Args:
        api_key: Explicit key. Falls back to ANTHROPIC_API_KEY.

    Returns:
        Configured Anthropic client instance.
    """
    timeout = get_llm_timeout_seconds()
    kwargs = {"timeout": timeout, "max_retries": get_llm_max_retries()}
    if api_key:
        kwargs["api_key"] = api_key

    if not ssl_verification_enabled():
        logger.debug("anthropic_ssl_verification_disabled")
        return Anthropic(http_client=DefaultHttpxClient(verify=False, timeout=timeout), **kwargs)

    return Anthropic(**kwargs)
