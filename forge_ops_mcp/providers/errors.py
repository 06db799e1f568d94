"""Error classification shared by all VCS providers.

Every provider translates its transport-level exceptions into a
``ProviderError`` so that tools can report a uniform failure regardless of
whether the request went to Gitea or GitHub. The translation is a lookup on
the HTTP status code; no retry is attempted here, the ``retryable`` flag is
informational only.
"""

from datetime import datetime, timezone
from enum import Enum
from functools import wraps
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, TypeVar

import structlog

if TYPE_CHECKING:
    from .abc import VcsProviderBase

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


class ErrorCode(str, Enum):
    """Symbolic error codes for provider failures."""

    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RATE_LIMITED = "RATE_LIMITED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_GATEWAY = "BAD_GATEWAY"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    GATEWAY_TIMEOUT = "GATEWAY_TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


STATUS_CODE_MAP: dict[int, ErrorCode] = {
    400: ErrorCode.BAD_REQUEST,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION_ERROR,
    429: ErrorCode.RATE_LIMITED,
    500: ErrorCode.INTERNAL_SERVER_ERROR,
    502: ErrorCode.BAD_GATEWAY,
    503: ErrorCode.SERVICE_UNAVAILABLE,
    504: ErrorCode.GATEWAY_TIMEOUT,
}
"""Mapping of HTTP status codes to symbolic error codes."""

RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({429, 500, 502, 503, 504})
"""HTTP status codes flagged as retryable."""


class ProviderError(Exception):
    """Raised when a provider operation fails.

    Attributes:
        code: Symbolic error code, either an ``ErrorCode`` value or ``HTTP_<status>``.
        message: Human readable message prefixed with the provider name.
        provider: Name of the provider that raised the error.
        status_code: HTTP status code, if a response was received.
        retryable: Whether repeating the request could succeed.
    """

    def __init__(
        self,
        code: str,
        message: str,
        provider: str,
        status_code: int | None = None,
        retryable: bool = False,
    ) -> None:
        """Initialize the error with its classification."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.provider = provider
        self.status_code = status_code
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Return the error as a dictionary suitable for structured logging."""
        return {
            "code": self.code,
            "message": self.message,
            "provider": self.provider,
            "status_code": self.status_code,
            "retryable": self.retryable,
        }


def get_error_code(status: int) -> str:
    """Map an HTTP status code to its symbolic error code."""
    code = STATUS_CODE_MAP.get(status)
    if code is None:
        return f"HTTP_{status}"
    return code.value


def is_retryable(status: int) -> bool:
    """Return True if the HTTP status code is flagged as retryable."""
    return status in RETRYABLE_STATUS_CODES


def get_rate_limit_info(headers: Mapping[str, str] | None) -> str:
    """Describe when a rate limit resets, based on the response headers."""
    if headers:
        reset_time = headers.get("x-ratelimit-reset") or headers.get("x-rate-limit-reset")
        if reset_time:
            try:
                reset_date = datetime.fromtimestamp(int(reset_time), tz=timezone.utc)
            except (ValueError, OverflowError, OSError):
                return "Please try again later"
            return f"Reset at: {reset_date.strftime('%H:%M:%S')} UTC"
    return "Please try again later"


def get_error_message(status: int, data: Any, provider: str, headers: Mapping[str, str] | None = None) -> str:
    """Build a provider-prefixed message for an HTTP error response."""
    base_message = ""
    if isinstance(data, dict):
        base_message = str(data.get("message") or data.get("error") or "")

    if status == 400:
        return f"{provider}: Bad request - {base_message or 'Invalid parameters'}"
    if status == 401:
        return f"{provider}: Unauthorized - Check your token and permissions"
    if status == 403:
        return f"{provider}: Forbidden - Insufficient permissions for this operation"
    if status == 404:
        if "user" in base_message.lower():
            return f"{provider}: User not found - The specified user doesn't exist or has been deleted"
        return f"{provider}: Not found - Resource doesn't exist or has been deleted"
    if status == 409:
        if "already exists" in base_message or "Conflict" in base_message:
            return f"{provider}: Resource already exists - {base_message}"
        return f"{provider}: Conflict - {base_message or 'Resource already exists or conflicts with existing data'}"
    if status == 422:
        return f"{provider}: Validation error - {base_message or 'Invalid data provided'}"
    if status == 429:
        return f"{provider}: Rate limited - Too many requests. {get_rate_limit_info(headers)}"
    if status == 500:
        return f"{provider}: Internal server error - {base_message or 'Server encountered an error'}"
    if status == 502:
        return f"{provider}: Bad gateway - Server is temporarily unavailable"
    if status == 503:
        return f"{provider}: Service unavailable - Server is temporarily down for maintenance"
    if status == 504:
        return f"{provider}: Gateway timeout - Server took too long to respond"
    return f"{provider}: HTTP {status} - {base_message or 'Unknown error'}"


def error_from_response(status: int, data: Any, provider: str, headers: Mapping[str, str] | None = None) -> ProviderError:
    """Classify an HTTP error response into a ProviderError."""
    return ProviderError(
        code=get_error_code(status),
        message=get_error_message(status, data, provider, headers),
        provider=provider,
        status_code=status,
        retryable=is_retryable(status),
    )


def network_error(provider: str) -> ProviderError:
    """Build the error reported when no response was received."""
    return ProviderError(
        code=ErrorCode.NETWORK_ERROR.value,
        message=f"{provider}: Network error - No response received",
        provider=provider,
        retryable=True,
    )


def unknown_error(exc: BaseException, provider: str) -> ProviderError:
    """Build the error reported for failures that are not HTTP related."""
    return ProviderError(
        code=ErrorCode.UNKNOWN_ERROR.value,
        message=f"{provider}: {str(exc) or 'Unknown error'}",
        provider=provider,
        retryable=False,
    )


def directory_error(path: str, provider: str) -> ProviderError:
    """Build the error reported when a file operation is given a directory path."""
    return ProviderError(
        code=ErrorCode.BAD_REQUEST.value,
        message=f"{provider}: '{path}' is a directory; use action 'list'",
        provider=provider,
        status_code=None,
        retryable=False,
    )


def translate_provider_errors(func: F) -> F:
    """Decorator translating exceptions raised by a provider method into ProviderError."""

    @wraps(func)
    async def wrapper(self: "VcsProviderBase", *args: Any, **kwargs: Any) -> Any:
        try:
            return await func(self, *args, **kwargs)
        except ProviderError:
            raise
        except Exception as exc:
            error = self.normalize_error(exc)
            logger.error(
                "Provider request failed",
                operation=func.__name__,
                error_type=type(exc).__name__,
                **error.to_dict(),
            )
            raise error from exc

    return wrapper  # type: ignore
