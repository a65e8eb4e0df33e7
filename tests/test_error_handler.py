"""Tests for typed errors and provider error mapping."""
from __future__ import annotations

import pytest

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


class TestHandleProviderError:
    """Tests for SDK exception classification."""

    @pytest.mark.parametrize(
        "message,expected",
        [
            ("Error code: 529 - overloaded_error", OverloadedError),
            ("Error code: 429 - rate_limit_error", RateLimitError),
            ("Error code: 401 - invalid x-api-key", AuthenticationError),
            ("Could not decode JSON body", InvalidResponseError),
        ],
    )
    def test_known_failures(self, message, expected):
        assert isinstance(handle_provider_error(Exception(message)), expected)

    def test_overloaded_and_rate_limit_are_retryable(self):
        assert handle_provider_error(Exception("529")).is_retryable
        assert handle_provider_error(Exception("429")).is_retryable
        assert not handle_provider_error(Exception("401")).is_retryable

    def test_generic_failure_keeps_type_name(self):
        err = handle_provider_error(ValueError("something odd"))
        assert type(err) is ProviderError
        assert err.error_type == "ValueError"
        assert err.details == "something odd"
        assert not err.is_retryable

    def test_connection_failure_is_retryable(self):
        assert handle_provider_error(RuntimeError("connection reset by peer")).is_retryable

    def test_provider_error_passes_through(self):
        original = RateLimitError(retry_after=5)
        assert handle_provider_error(original) is original

    def test_all_provider_errors_share_category(self):
        for err in (OverloadedError(), RateLimitError(), AuthenticationError(), InvalidResponseError()):
            assert err.category == ErrorCategory.LLM_PROVIDER


class TestUserMessages:
    def test_message_includes_details_and_tip(self):
        msg = RateLimitError(retry_after=30).get_user_message()
        assert "rate limit exceeded" in msg
        assert "Retry after 30 seconds" in msg
        assert "retry in a few moments" in msg

    def test_validation_details_truncated(self):
        err = ContextValidationError("x" * 1000)
        assert err.category == ErrorCategory.VALIDATION
        assert len(err.details) == 500

    def test_error_type_defaults_to_category(self):
        err = LaunchReadyError(category=ErrorCategory.FILE_IO, message="missing")
        assert err.error_type == "file-io"
        assert str(err) == "missing"


class TestExitWithError:
    def test_returns_one_and_prints_next_steps(self, capsys):
        err = LaunchReadyError(category=ErrorCategory.FILE_IO, message="Input file not found: x.json")
        assert exit_with_error(err, context="assess") == 1

        stderr = capsys.readouterr().err
        assert "Input file not found: x.json" in stderr
        assert "Next steps:" in stderr
        assert "product context file" in stderr

    def test_provider_hint(self, capsys):
        exit_with_error(AuthenticationError())
        assert "--provider none" in capsys.readouterr().err
