"""Notification data models."""

from dataclasses import dataclass
from enum import Enum


class Channel(Enum):
    """Independent notification slots."""
    AUTH = "auth"
    QUERY = "query"


class Severity(Enum):
    """How a notification is presented."""
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    """A transient message shown on one channel."""
    channel: Channel
    severity: Severity
    text: str
