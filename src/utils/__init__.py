from utils.error_handler import (
    AuthenticationError,
    ContextValidationError,
    ErrorCategory,
    InvalidResponseError,
    LaunchReadyError,
    OverloadedError,
    ProviderError,
    RateLimitError,
    exit_with_error,
    handle_provider_error,
)

__all__ = [
    "AuthenticationError",
    "ContextValidationError",
    "ErrorCategory",
    "InvalidResponseError",
    "LaunchReadyError",
    "OverloadedError",
    "ProviderError",
    "RateLimitError",
    "exit_with_error",
    "handle_provider_error",
]
