"""Main Textual application hosting the cheat catalog page."""

from typing import ClassVar

from typing_extensions import override

from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.widgets import Footer, Header

import structlog

from cheathub.models.config import AppConfig
from cheathub.services.controller import CheatHubController
from cheathub.services.http_client import HttpClientService

from .clipboard import TerminalClipboard
from .screens import CatalogScreen

log = structlog.stdlib.get_logger()


class CheatHubApp(App[None]):
    """Main TUI application for browsing CheatSlips cheats.
    
    The application owns the page controller; screens read its state and
    call its actions.
    """
    
    CSS: ClassVar[str] = """
    Screen {
        background: $surface;
    }
    
    .title {
        text-align: center;
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }
    """
    
    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
        Binding("f1", "show_help", "Help", show=True),
    ]
    
    _controller: CheatHubController
    
    def __init__(
        self,
        http_client: HttpClientService,
        config: AppConfig | None = None,
    ) -> None:
        """Initialize the application.
        
        Args:
            http_client: Client for the CheatSlips API
            config: Application configuration
        """
        super().__init__()
        self.title = "CheatHub"  # type: ignore[assignment]
        self.sub_title = "CheatSlips cheat browser"  # type: ignore[assignment]
        self._controller = CheatHubController(
            http_client=http_client,
            clipboard=TerminalClipboard(self),
            config=config,
        )
        log.info("CheatHubApp initialized")
    
    @property
    def controller(self) -> CheatHubController:
        return self._controller
    
    @override
    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header()
        yield Footer()
    
    async def on_mount(self) -> None:
        """Open the catalog page."""
        await self.push_screen(CatalogScreen())
    
    async def action_show_help(self) -> None:
        """Show help information."""
        self.notify(
            "Enter your CheatSlips account and press Get API Token (ctrl+t), "
            "then look up a TitleId/BuildID (ctrl+g). ctrl+q quits."
        )
