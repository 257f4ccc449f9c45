"""Typed failures raised by the summary service.

Messages are fixed strings. They must never include session-note content,
since they reach logs and client-visible error envelopes.
"""

from typing import ClassVar


class SummaryError(Exception):
    """Base exception for all summary-generation errors."""

    status_code: ClassVar[int] = 500
    code: ClassVar[str] = "summary_error"
    default_message: ClassVar[str] = "Failed to generate summary"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ConfigurationError(SummaryError):
    """Raised at construction time when a required setting is missing."""

    code = "configuration_error"
    default_message = "API key not configured"


class RequestValidationError(SummaryError):
    """Raised when a summary request body fails validation."""

    status_code = 400
    code = "validation_error"
    default_message = "Validation Error"


class EmptyCompletionError(SummaryError):
    """Raised when the provider returns no usable choice."""

    code = "empty_completion"
    default_message = "Failed to generate summary"


class ProviderError(SummaryError):
    """Base for failures reported by the completion provider."""

    code = "provider_error"


class ProviderAuthError(ProviderError):
    code = "provider_auth"
    default_message = "Invalid API key or authentication failed"


class ProviderRateLimitError(ProviderError):
    status_code = 429
    code = "provider_rate_limit"
    default_message = "API rate limit exceeded. Please try again later."


class ProviderQuotaError(ProviderError):
    status_code = 402
    code = "provider_quota"
    default_message = "Insufficient credits. Please check your provider balance."


class ProviderBadRequestError(ProviderError):
    status_code = 400
    code = "provider_bad_request"
    default_message = "Invalid request to AI API"


class ProviderPermissionError(ProviderError):
    status_code = 403
    code = "provider_permission"
    default_message = "Access denied. Please check your API permissions."


class ProviderGenericError(ProviderError):
    code = "provider_failure"
    default_message = "Failed to generate summary due to AI service error"
