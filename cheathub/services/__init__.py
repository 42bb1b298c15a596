"""Service layer for business logic and external integrations."""

from .auth import AuthSession, format_expiration
from .cheat_catalog import CheatCatalogQuery, cheats_path
from .clipboard import ClipboardService, ClipboardWriter
from .config import ConfigurationService, ValidationResult
from .controller import CheatHubController
from .disclosure import ResultDisclosureState
from .errors import (
    ApiError,
    AppError,
    ClipboardError,
    ErrorCategory,
    ErrorSeverity,
    MalformedResponseError,
    TransportError,
    ValidationError,
    extract_api_error_message,
)
from .http_client import ApiResponse, HttpClientService
from .notifications import NotificationCenter

__all__ = [
    "ApiError",
    "ApiResponse",
    "AppError",
    "AuthSession",
    "CheatCatalogQuery",
    "CheatHubController",
    "ClipboardError",
    "ClipboardService",
    "ClipboardWriter",
    "ConfigurationService",
    "ErrorCategory",
    "ErrorSeverity",
    "HttpClientService",
    "MalformedResponseError",
    "NotificationCenter",
    "ResultDisclosureState",
    "TransportError",
    "ValidationError",
    "ValidationResult",
    "cheats_path",
    "extract_api_error_message",
    "format_expiration",
]
