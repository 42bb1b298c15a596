"""User interface components using Textual framework."""

from .app import CheatHubApp
from .clipboard import TerminalClipboard
from .screens import BaseScreen, CatalogScreen

__all__ = [
    "BaseScreen",
    "CatalogScreen",
    "CheatHubApp",
    "TerminalClipboard",
]
