"""Custom widgets for the TUI application."""

from .cheat_file import CheatFileCard, get_cheat_file_display_info
from .notification import NotificationBanner

__all__ = [
    "CheatFileCard",
    "NotificationBanner",
    "get_cheat_file_display_info",
]
