"""Base screen class with common functionality for all screens."""

from typing import TYPE_CHECKING, ClassVar

from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Static

import structlog

if TYPE_CHECKING:
    from cheathub.services.controller import CheatHubController
    from cheathub.ui.app import CheatHubApp

log = structlog.stdlib.get_logger()


class BaseScreen(Screen[None]):
    """Base screen class providing common functionality for application screens.
    
    This class provides:
    - Access to the parent application and its controller
    - Logging of screen lifecycle events
    """
    
    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "go_back", "Back", show=True),
    ]
    
    # Screen metadata - subclasses should override these
    SCREEN_TITLE: ClassVar[str] = "Screen"
    SCREEN_NAME: ClassVar[str] = "base"
    
    def __init__(self, name: str | None = None) -> None:
        super().__init__(name=name or self.SCREEN_NAME)
    
    @property
    def cheathub_app(self) -> "CheatHubApp":
        """Get the parent CheatHubApp instance.
        
        Raises:
            RuntimeError: If the screen is not attached to a CheatHubApp
        """
        from cheathub.ui.app import CheatHubApp
        
        if isinstance(self.app, CheatHubApp):
            return self.app
        raise RuntimeError("Screen is not attached to a CheatHubApp")
    
    @property
    def controller(self) -> "CheatHubController":
        """The page controller owned by the application."""
        return self.cheathub_app.controller
        
    async def on_mount(self) -> None:
        """Handle screen mount event."""
        log.info("Screen mounted", screen=self.SCREEN_NAME, title=self.SCREEN_TITLE)
    
    async def on_unmount(self) -> None:
        """Handle screen unmount event."""
        log.info("Screen unmounted", screen=self.SCREEN_NAME)
    
    async def action_go_back(self) -> None:
        """Leave the screen; the root screen quits the application."""
        if len(self.app.screen_stack) > 2:
            self.app.pop_screen()
        else:
            log.info("Quit requested from root screen", screen=self.SCREEN_NAME)
            self.app.exit()
    
    def create_title_widget(self, title: str | None = None) -> Static:
        """Create a styled title widget for the screen."""
        return Static(title or self.SCREEN_TITLE, classes="title")
