"""
ragprep Error Classification System.

This module provides a hierarchy of exceptions for the failures that can
occur while talking to a language model during query preprocessing.

Error Categories:
-----------------
1. Retryable Errors: Transient failures that may succeed on retry
   - Model unavailable (connection refused, HTTP 5xx)
   - Rate limiting (HTTP 429)
   - Timeouts (connect, read, total)

2. Permanent Errors: Failures that won't succeed on retry
   - Authentication errors (HTTP 401/403)
   - Quota exhausted
   - Invalid parameters (HTTP 400/404/422, bad model or dimensions)
   - Invalid or malformed model responses
   - Configuration errors

The query optimizer absorbs all of these and falls back to the original
query. The embedding generator propagates them; the caller decides whether
to retry, skip or abort.

Usage:
------
    from ragprep.errors import InvalidParameterError, is_retryable

    try:
        vectors = await generator.embed(chunks)
    except InvalidParameterError as e:
        logger.error(f"Bad embedding request: {e}")
        raise
    except RagPrepError as e:
        if is_retryable(e):
            ...
"""

from typing import Any


class RagPrepError(Exception):
    """
    Base exception for all ragprep errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


# =============================================================================
# Retryable Errors
# =============================================================================

class RetryableError(RagPrepError):
    """
    Base class for errors that may succeed on retry.

    Attributes:
        retry_after: Suggested wait time before retry (seconds), if known
    """

    def __init__(
        self,
        message: str,
        retry_after: float | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)
        self.retry_after = retry_after


class ModelUnavailableError(RetryableError):
    """
    Raised when the language model service cannot be reached or is down.

    Covers DNS failures, refused connections, HTTP 503 and other 5xx
    responses.
    """

    def __init__(
        self,
        message: str = "Language model service unavailable",
        retry_after: float | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, retry_after, details, original_error)


class RateLimitError(RetryableError):
    """
    Raised when API rate limit is exceeded (HTTP 429).

    The retry_after attribute carries the Retry-After header value when the
    server sent one.
    """

    def __init__(
        self,
        message: str = "API rate limit exceeded",
        retry_after: float | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, retry_after, details, original_error)


class ModelTimeoutError(RetryableError):
    """
    Raised when a model call exceeds its time limit.

    Attributes:
        timeout: The timeout value that was exceeded (seconds)
        timeout_type: Type of timeout ('connect', 'read', 'total')
    """

    def __init__(
        self,
        message: str = "Request timed out",
        timeout: float | None = None,
        timeout_type: str = "total",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        details = details or {}
        details["timeout"] = timeout
        details["timeout_type"] = timeout_type
        super().__init__(message, retry_after=None, details=details, original_error=original_error)
        self.timeout = timeout
        self.timeout_type = timeout_type


class ConnectTimeoutError(ModelTimeoutError):
    """Raised when connection attempt times out."""

    def __init__(
        self,
        message: str = "Connection timed out",
        timeout: float | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, timeout, "connect", details, original_error)


class ReadTimeoutError(ModelTimeoutError):
    """Raised when reading response times out."""

    def __init__(
        self,
        message: str = "Read timed out while waiting for response",
        timeout: float | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, timeout, "read", details, original_error)


# =============================================================================
# Permanent Errors
# =============================================================================

class PermanentError(RagPrepError):
    """
    Base class for errors that will not succeed on retry.

    Retrying these errors is wasteful and may trigger rate limiting.
    """
    pass


class AuthenticationError(PermanentError):
    """Raised when authentication fails (HTTP 401/403)."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class QuotaExceededError(PermanentError):
    """
    Raised when account quota is exceeded.

    Unlike RateLimitError, the account has exhausted its allocation and
    waiting a few seconds will not help.
    """

    def __init__(
        self,
        message: str = "Account quota exceeded",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class InvalidParameterError(PermanentError):
    """
    Raised when request parameters are invalid.

    Common causes:
    - Empty embedding batch
    - Unsupported or non-positive dimensions
    - Unknown model identifier
    """

    def __init__(
        self,
        message: str = "Invalid request parameters",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class ConfigurationError(PermanentError):
    """Raised when there's a configuration problem (missing key, bad preset)."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class InvalidResponseError(PermanentError):
    """Raised when the model returns a response that cannot be used."""

    def __init__(
        self,
        message: str = "Invalid response from language model",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class MalformedResponseError(InvalidResponseError):
    """
    Raised when an embedding response does not line up with its request.

    Either the vector count differs from the input count or a vector has
    the wrong length.
    """

    def __init__(
        self,
        message: str = "Malformed embedding response",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


# =============================================================================
# Helper Functions
# =============================================================================

def is_retryable(error: Exception) -> bool:
    """
    Check if an error is retryable.

    Args:
        error: The exception to check

    Returns:
        True if the error is an instance of RetryableError
    """
    return isinstance(error, RetryableError)


def classify_http_error(status_code: int, message: str = "", headers: dict | None = None) -> RagPrepError:
    """
    Classify an HTTP error based on status code.

    Args:
        status_code: HTTP status code
        message: Error message from response
        headers: Response headers (used to extract Retry-After)

    Returns:
        Appropriate RagPrepError subclass instance
    """
    headers = headers or {}
    retry_after = None

    if "Retry-After" in headers:
        try:
            retry_after = float(headers["Retry-After"])
        except (ValueError, TypeError):
            pass

    details = {"status_code": status_code}

    if status_code == 429:
        return RateLimitError(
            message=message or "API rate limit exceeded",
            retry_after=retry_after,
            details=details
        )
    elif status_code == 401:
        return AuthenticationError(
            message=message or "Authentication failed - invalid API key",
            details=details
        )
    elif status_code == 403:
        return AuthenticationError(
            message=message or "Access forbidden - insufficient permissions",
            details=details
        )
    elif status_code in (400, 404, 422):
        return InvalidParameterError(
            message=message or "Invalid request parameters",
            details=details
        )
    elif status_code == 408:
        return ModelTimeoutError(
            message=message or "Request timed out",
            details=details
        )
    elif status_code >= 500:
        return ModelUnavailableError(
            message=message or f"Server error (HTTP {status_code})",
            retry_after=retry_after,
            details=details
        )
    else:
        return PermanentError(
            message=message or f"HTTP error {status_code}",
            details=details
        )


def wrap_exception(
    error: Exception,
    context: str = "",
    retryable: bool | None = None
) -> RagPrepError:
    """
    Wrap a generic exception in an appropriate RagPrepError.

    Errors that already belong to the hierarchy are returned as-is.

    Args:
        error: The original exception
        context: Additional context about where the error occurred
        retryable: Override retryability detection (None = auto-detect)

    Returns:
        RagPrepError instance wrapping the original error

    Example:
        try:
            vectors = await client.embeddings.create(...)
        except Exception as e:
            raise wrap_exception(e, context="Embedding request") from e
    """
    if isinstance(error, RagPrepError):
        return error

    error_str = str(error).lower()
    error_type = type(error).__name__

    message = f"{context}: {error}" if context else str(error)

    if isinstance(error, TimeoutError) or "timeout" in error_str or "timed out" in error_str:
        if "connect" in error_str:
            return ConnectTimeoutError(message=message, original_error=error)
        elif "read" in error_str:
            return ReadTimeoutError(message=message, original_error=error)
        else:
            return ModelTimeoutError(message=message, original_error=error)

    if any(x in error_str for x in ["rate limit", "too many requests", "429"]):
        return RateLimitError(message=message, original_error=error)

    if "quota" in error_str:
        return QuotaExceededError(message=message, original_error=error)

    if any(x in error_str for x in ["auth", "api key", "credential", "401", "403"]):
        return AuthenticationError(message=message, original_error=error)

    if isinstance(error, ConnectionError) or any(
        x in error_str for x in ["connection", "connect", "network", "dns", "unavailable"]
    ):
        return ModelUnavailableError(message=message, original_error=error)

    if isinstance(error, (ValueError, TypeError)):
        return InvalidParameterError(message=message, original_error=error)

    if retryable is True:
        return ModelUnavailableError(message=message, original_error=error)
    elif retryable is False:
        return PermanentError(message=message, original_error=error)

    if error_type in ("ConnectError", "TimeoutException"):
        return ModelUnavailableError(message=message, original_error=error)

    # Unknown errors default to permanent so callers never retry forever
    return PermanentError(message=message, original_error=error)
