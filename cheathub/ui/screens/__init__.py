"""Screen components for the TUI application."""

from .base import BaseScreen
from .catalog import CatalogScreen, format_token_panel, get_game_header_info

__all__ = [
    "BaseScreen",
    "CatalogScreen",
    "format_token_panel",
    "get_game_header_info",
]
