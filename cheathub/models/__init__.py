"""Data models for the CheatHub application."""

from .cheats import CheatFile, Credentials, GameResult, QueryInput, Token
from .config import DEFAULT_API_BASE_URL, AppConfig
from .notification import Channel, Notification, Severity
from .result import Err, Ok, Outcome

__all__ = [
    "AppConfig",
    "Channel",
    "CheatFile",
    "Credentials",
    "DEFAULT_API_BASE_URL",
    "Err",
    "GameResult",
    "Notification",
    "Ok",
    "Outcome",
    "QueryInput",
    "Severity",
    "Token",
]
