"""Error types and message extraction for the CheatHub application.

This module provides:
- Custom exception classes for the failure kinds an operation can report
  (local validation, remote API, transport, clipboard)
- The ordered fallback used to turn an API error body into a user message
- The advisory suffix for transport failures that look like a blocked fetch
"""

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

import structlog

log = structlog.stdlib.get_logger()

# Lowercased fragments that identify "the request never reached the server".
FETCH_FAILED_PATTERNS: tuple[str, ...] = (
    "failed to fetch",
    "all connection attempts failed",
    "name or service not known",
    "nodename nor servname provided",
    "temporary failure in name resolution",
    "connection refused",
)

TRANSPORT_ADVISORY = (
    " This may be caused by network problems or the server's cross-origin policy."
    " Check your network and confirm the API server accepts requests from this client."
)


class ErrorCategory(Enum):
    """Categories of errors for classification and handling."""
    VALIDATION = "validation"
    API = "api"
    TRANSPORT = "transport"
    CLIPBOARD = "clipboard"
    UNEXPECTED = "unexpected"


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    WARNING = "warning"
    ERROR = "error"


class AppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNEXPECTED,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        technical_details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.technical_details = technical_details


class ValidationError(AppError):
    """Required input is missing; detected before any network call."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.WARNING,
            technical_details=f"Field: {field}" if field else None,
        )
        self.field = field


class ApiError(AppError):
    """The endpoint answered, but not with something usable."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        technical_details = None
        if url:
            technical_details = f"URL: {url}"
        if status_code is not None:
            technical_details = f"Status: {status_code}" + (f"\n{technical_details}" if technical_details else "")

        super().__init__(
            message=message,
            category=ErrorCategory.API,
            severity=ErrorSeverity.ERROR,
            technical_details=technical_details,
        )
        self.status_code = status_code
        self.url = url


class MalformedResponseError(ApiError):
    """A success status whose body does not have the expected shape."""


class TransportError(AppError):
    """The request could not complete (DNS, refused connection, timeout...)."""

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        url: str | None = None,
    ) -> None:
        technical_details = None
        if original_error:
            technical_details = f"{type(original_error).__name__}: {str(original_error)}"
        if url:
            technical_details = f"URL: {url}" + (f"\n{technical_details}" if technical_details else "")

        super().__init__(
            message=message,
            category=ErrorCategory.TRANSPORT,
            severity=ErrorSeverity.ERROR,
            technical_details=technical_details,
        )
        self.original_error = original_error
        self.url = url

    @property
    def looks_like_fetch_failure(self) -> bool:
        """True when the raw text matches a known "could not reach server" pattern."""
        return is_fetch_failure(self.message)


class ClipboardError(AppError):
    """Writing to the clipboard failed. Recorded for diagnostics only."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(
            message=message,
            category=ErrorCategory.CLIPBOARD,
            severity=ErrorSeverity.WARNING,
            technical_details=(
                f"{type(original_error).__name__}: {str(original_error)}" if original_error else None
            ),
        )
        self.original_error = original_error


def is_fetch_failure(text: str) -> bool:
    """Check whether transport error text indicates the fetch never went out."""
    lowered = text.lower()
    return any(pattern in lowered for pattern in FETCH_FAILED_PATTERNS)


def describe_transport_error(prefix: str, error: TransportError) -> str:
    """Build the user message for a transport failure.

    Args:
        prefix: Operation-specific lead-in, e.g. "Network error while requesting the token"
        error: The transport error

    Returns:
        Message with the raw transport text and, for fetch failures, the advisory suffix
    """
    text = f"{prefix}: {error.message}"
    if error.looks_like_fetch_failure:
        text += TRANSPORT_ADVISORY
    return text


def flatten_error_details(errors: Any) -> str:
    """Flatten an ``errors`` object (field -> list of messages) into one line.

    Values are flattened one level and joined with ``"; "``. Anything that
    cannot be flattened that way is rendered as JSON.
    """
    if isinstance(errors, Mapping):
        values = list(errors.values())
    elif isinstance(errors, list):
        values = errors
    else:
        return json.dumps(errors, ensure_ascii=False, default=str)

    parts: list[str] = []
    for value in values:
        if isinstance(value, list):
            parts.extend(str(item) for item in value)
        else:
            parts.append(str(value))
    return "; ".join(parts)


def extract_api_error_message(
    body: Any,
    status_code: int,
    reason_phrase: str,
) -> str:
    """Pick the most specific message an error response offers.

    Order: ``message``, then ``title``, then flattened ``errors``, then
    ``"<status code>: <reason phrase>"``.

    Args:
        body: Decoded JSON body, or None if the body was not JSON
        status_code: HTTP status code
        reason_phrase: HTTP reason phrase

    Returns:
        A non-empty user-facing message
    """
    fallback = f"{status_code}: {reason_phrase}"
    if not isinstance(body, Mapping):
        return fallback

    if body.get("message"):
        return str(body["message"])
    if body.get("title"):
        return str(body["title"])

    errors = body.get("errors")
    if errors and isinstance(errors, (Mapping, list)):
        flattened = flatten_error_details(errors)
        if flattened:
            return flattened

    return fallback


def log_app_error(error: AppError, operation: str, component: str) -> None:
    """Log an application error with its technical details.

    Validation problems are expected user mistakes and are logged at info.
    """
    if error.category == ErrorCategory.VALIDATION:
        log_method = log.info
    elif error.severity == ErrorSeverity.ERROR:
        log_method = log.error
    else:
        log_method = log.warning

    log_method(
        "Operation failed",
        error_message=error.message,
        category=error.category.value,
        severity=error.severity.value,
        operation=operation,
        component=component,
        technical_details=error.technical_details,
    )
