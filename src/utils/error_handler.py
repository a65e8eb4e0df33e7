"""Graceful error handling with user-friendly messages."""
from __future__ import annotations

import sys
from enum import Enum
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)


class ErrorCategory(str, Enum):
    JURISDICTION_MAPPING = "jurisdiction-mapping"
    LLM_PROVIDER = "llm-provider"
    VALIDATION = "validation"
    FILE_IO = "file-io"
    CONFIG = "config"


class LaunchReadyError(Exception):
    """Base class for errors surfaced to the user."""

    def __init__(
        self,
        category: ErrorCategory,
        message: str,
        details: str = "",
        is_retryable: bool = False,
        error_type: str = "",
    ):
        self.category = category
        self.message = message
        self.details = details
        self.is_retryable = is_retryable
        self.error_type = error_type or category.value
        super().__init__(self.message)

    def get_user_message(self) -> str:
        """Return a user-friendly error message."""
        msg = f"\nError: {self.message}"
        if self.details:
            msg += f"\n   Details: {self.details}"
        if self.is_retryable:
            msg += "\n   Tip: This is a temporary issue. Please retry in a few moments."
        return msg


class ProviderError(LaunchReadyError):
    """LLM provider call failed."""

    def __init__(self, error_type: str, message: str, details: str = "", is_retryable: bool = False):
        super().__init__(
            category=ErrorCategory.LLM_PROVIDER,
            message=message,
            details=details,
            is_retryable=is_retryable,
            error_type=error_type,
        )


class OverloadedError(ProviderError):
    """Provider is overloaded (HTTP 529)."""

    def __init__(self, request_id: str = ""):
        super().__init__(
            error_type="API_OVERLOADED",
            message="LLM provider is currently overloaded",
            details=f"Request ID: {request_id}" if request_id else "The service is at capacity",
            is_retryable=True,
        )


class RateLimitError(ProviderError):
    """Provider rate limit exceeded (HTTP 429)."""

    def __init__(self, retry_after: Optional[int] = None):
        details = f"Retry after {retry_after} seconds" if retry_after else "Rate limit exceeded"
        super().__init__(
            error_type="RATE_LIMIT",
            message="LLM provider rate limit exceeded",
            details=details,
            is_retryable=True,
        )


class AuthenticationError(ProviderError):
    """Authentication failed (HTTP 401/403)."""

    def __init__(self):
        super().__init__(
            error_type="AUTH_FAILED",
            message="Authentication failed - check your ANTHROPIC_API_KEY",
            details="Ensure ANTHROPIC_API_KEY environment variable is set correctly",
            is_retryable=False,
        )


class InvalidResponseError(ProviderError):
    """Provider returned an invalid or empty response."""

    def __init__(self, response_type: str = ""):
        super().__init__(
            error_type="INVALID_RESPONSE",
            message=f"LLM provider returned invalid response{f' ({response_type})' if response_type else ''}",
            details="The API response could not be parsed. This may be a temporary issue.",
            is_retryable=True,
        )


class ContextValidationError(LaunchReadyError):
    """Product context failed schema validation."""

    def __init__(self, validation_error: str):
        super().__init__(
            category=ErrorCategory.VALIDATION,
            message="Product context failed validation",
            details=validation_error[:500],
        )


def handle_provider_error(error: Exception) -> ProviderError:
    """Convert provider SDK exceptions to a typed ProviderError."""
    if isinstance(error, ProviderError):
        return error

    error_str = str(error)
    error_type = type(error).__name__

    if "529" in error_str or "overloaded" in error_str.lower():
        request_id = ""
        if "request_id" in error_str:
            try:
                request_id = error_str.split("request_id': '")[1].split("'")[0]
            except (IndexError, ValueError):
                pass
        return OverloadedError(request_id)

    elif "429" in error_str or "rate_limit" in error_str.lower():
        retry_after = None
        if "retry_after" in error_str:
            try:
                retry_after = int(error_str.split("retry_after")[1].split()[0])
            except (IndexError, ValueError):
                pass
        return RateLimitError(retry_after)

    elif "401" in error_str or "403" in error_str or "authentication" in error_str.lower():
        return AuthenticationError()

    elif "json" in error_str.lower() or "parse" in error_str.lower():
        return InvalidResponseError("JSON parsing")

    return ProviderError(
        error_type=error_type,
        message="LLM provider request failed",
        details=error_str[:200],  # Truncate long error messages
        is_retryable="timeout" in error_str.lower() or "connection" in error_str.lower(),
    )


def exit_with_error(error: LaunchReadyError, context: str = "") -> int:
    """Log error and return the CLI exit code with a user-friendly message."""
    logger.error(
        "command_failed",
        category=error.category.value,
        error_type=error.error_type,
        message=error.message,
        details=error.details,
        context=context,
    )

    print(error.get_user_message(), file=sys.stderr)

    print("\nNext steps:", file=sys.stderr)
    if error.is_retryable:
        print("   1. Wait a moment for the service to recover", file=sys.stderr)
        print("   2. Run the same command again", file=sys.stderr)
    elif error.category == ErrorCategory.LLM_PROVIDER:
        print("   1. Check your ANTHROPIC_API_KEY environment variable", file=sys.stderr)
        print("   2. Or rerun with --provider none for the deterministic plan", file=sys.stderr)
    elif error.category in (ErrorCategory.VALIDATION, ErrorCategory.FILE_IO):
        print("   1. Check the product context file path and its JSON content", file=sys.stderr)
    else:
        print("   1. Check config/pipeline_config.yaml", file=sys.stderr)

    print("", file=sys.stderr)
    return 1
