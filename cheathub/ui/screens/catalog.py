"""Catalog screen: authentication, cheat lookup and result browsing."""

from typing import ClassVar

from typing_extensions import override

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.message import Message
from textual.widgets import Button, Input, LoadingIndicator, Static

import structlog

from cheathub.models.cheats import GameResult, Token
from cheathub.models.notification import Channel
from cheathub.services.auth import format_expiration
from cheathub.ui.widgets import CheatFileCard, NotificationBanner

from .base import BaseScreen

log = structlog.stdlib.get_logger()


def get_game_header_info(game: GameResult) -> dict[str, str]:
    """Get display information for the game header.
    
    The advisory ``count`` and the number of cheat files received are shown
    side by side; they are allowed to differ.
    
    Args:
        game: The game result to describe
        
    Returns:
        Dictionary with name, title id, slug, counts and artwork text
    """
    return {
        "name": game.name,
        "titleid": f"TitleID: {game.titleid}",
        "slug": f"Slug: {game.slug}",
        "count": f"Total cheat files: {game.count}",
        "received": f"Received: {len(game.cheats)}",
        "artwork": f"Artwork: {game.artwork_url}" if game.artwork_url else "",
    }


def format_token_panel(token: Token) -> str:
    """Text of the "current token" panel."""
    return f"Current API Token (valid until {format_expiration(token)}):\n{token.token}"


class CatalogScreen(BaseScreen):
    """Single page of the application.
    
    The screen renders controller state and forwards user actions to it.
    Network-bound actions run in workers so input stays responsive.
    """
    
    SCREEN_TITLE: ClassVar[str] = "🎮 CheatHub"
    SCREEN_NAME: ClassVar[str] = "catalog"
    
    CSS: ClassVar[str] = """
    #catalog-container {
        width: 100%;
        height: 100%;
        padding: 1 2;
    }
    
    #catalog-subtitle {
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }
    
    .section {
        height: auto;
        padding: 1 2;
        margin-bottom: 1;
        border: solid $primary;
        background: $surface;
    }
    
    .section-title {
        text-style: bold;
        color: $secondary;
        margin-bottom: 1;
    }
    
    .form-row {
        height: auto;
    }
    
    .form-row Input {
        width: 1fr;
    }
    
    .button-row {
        height: auto;
        align-horizontal: right;
    }
    
    .busy {
        width: 6;
        height: 3;
        display: none;
    }
    
    #token-panel {
        display: none;
        padding: 0 1;
        border: round $success;
        color: $success;
    }
    
    #game-header {
        display: none;
        padding: 1 2;
        margin-bottom: 1;
        border: double $accent;
    }
    
    #cheat-list {
        height: auto;
    }
    """
    
    BINDINGS: ClassVar[list[Binding]] = [
        Binding("ctrl+t", "request_token", "Get Token", show=True),
        Binding("ctrl+g", "request_cheats", "Get Cheats", show=True),
    ]
    
    class StateChanged(Message):
        """Posted when the controller reports a state change."""
    
    # Input id -> controller setter name
    INPUT_FIELDS: ClassVar[dict[str, str]] = {
        "input-email": "set_email",
        "input-password": "set_password",
        "input-title-id": "set_title_id",
        "input-build-id": "set_build_id",
    }
    
    _rendered_result: GameResult | None
    
    def __init__(self, name: str | None = None) -> None:
        super().__init__(name=name)
        self._rendered_result = None
    
    @override
    def compose(self) -> ComposeResult:
        """Compose the catalog layout."""
        with ScrollableContainer(id="catalog-container"):
            yield self.create_title_widget()
            yield Static("Browse game cheats from the CheatSlips catalog", id="catalog-subtitle")
            
            with Vertical(id="auth-section", classes="section"):
                yield Static("Account", classes="section-title")
                with Horizontal(classes="form-row"):
                    yield Input(placeholder="user@example.com", id="input-email")
                    yield Input(placeholder="Password", password=True, id="input-password")
                with Horizontal(classes="button-row"):
                    yield LoadingIndicator(id="auth-busy", classes="busy")
                    yield Button("Get API Token", id="btn-token", variant="primary")
                yield NotificationBanner(id="auth-message")
                yield Static("", id="token-panel", markup=False)
            
            with Vertical(id="query-section", classes="section"):
                yield Static("Find cheats", classes="section-title")
                with Horizontal(classes="form-row"):
                    yield Input(placeholder="TitleId, e.g. 0100A3D008C5C000", id="input-title-id")
                    yield Input(placeholder="BuildID, e.g. 421C5411B487EB4D", id="input-build-id")
                with Horizontal(classes="button-row"):
                    yield LoadingIndicator(id="query-busy", classes="busy")
                    yield Button("Get Cheats", id="btn-cheats", variant="success")
                yield NotificationBanner(id="query-message")
            
            yield Static("", id="game-header", markup=False)
            yield Vertical(id="cheat-list")
    
    @override
    async def on_mount(self) -> None:
        """Subscribe to controller changes and render the initial state."""
        await super().on_mount()
        self.controller.subscribe(self._on_controller_change)
        await self._refresh_view()
    
    @override
    async def on_unmount(self) -> None:
        self.controller.unsubscribe(self._on_controller_change)
        await super().on_unmount()
    
    def _on_controller_change(self) -> None:
        self.post_message(self.StateChanged())
    
    async def on_catalog_screen_state_changed(self, message: StateChanged) -> None:
        await self._refresh_view()
    
    def on_input_changed(self, event: Input.Changed) -> None:
        """Push field edits into the controller."""
        setter = self.INPUT_FIELDS.get(event.input.id or "")
        if setter:
            getattr(self.controller, setter)(event.value)
    
    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in a form field triggers that form's action."""
        if event.input.id in ("input-email", "input-password"):
            self.action_request_token()
        elif event.input.id in ("input-title-id", "input-build-id"):
            self.action_request_cheats()
    
    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button = event.button
        
        if button.id == "btn-token":
            self.action_request_token()
        elif button.id == "btn-cheats":
            self.action_request_cheats()
        elif button.has_class("cheat-toggle") and button.name:
            expanded = self.controller.toggle_expand(button.name)
            log.debug("Cheat file toggled", cheat_id=button.name, expanded=expanded)
        elif button.has_class("copy-button") and button.name:
            self.run_worker(self.controller.copy_cheat(button.name), group="clipboard")
    
    def action_request_token(self) -> None:
        self.run_worker(self.controller.request_token(), group="auth")
    
    def action_request_cheats(self) -> None:
        self.run_worker(self.controller.request_cheats(), group="query")
    
    async def _refresh_view(self) -> None:
        """Render the controller state."""
        controller = self.controller
        
        self.query_one("#auth-message", NotificationBanner).show_notification(
            controller.notification(Channel.AUTH)
        )
        self.query_one("#query-message", NotificationBanner).show_notification(
            controller.notification(Channel.QUERY)
        )
        self.query_one("#auth-busy", LoadingIndicator).display = controller.auth_loading
        self.query_one("#btn-token", Button).disabled = controller.auth_loading
        self.query_one("#query-busy", LoadingIndicator).display = controller.query_loading
        self.query_one("#btn-cheats", Button).disabled = controller.query_loading
        
        token = controller.token
        token_panel = self.query_one("#token-panel", Static)
        token_panel.display = token is not None
        token_panel.update(format_token_panel(token) if token else "")
        
        # Looking up cheats only makes sense with a token
        self.query_one("#query-section", Vertical).display = token is not None
        
        await self._render_result(controller.game_result)
        
        disclosure = controller.disclosure
        for card in self.query(CheatFileCard).results(CheatFileCard):
            card.set_state(
                expanded=disclosure.is_expanded(card.cheat.id),
                copied=disclosure.is_copied(card.cheat.id),
            )
    
    async def _render_result(self, game: GameResult | None) -> None:
        """Rebuild the game header and cheat cards when the result changes."""
        if game is self._rendered_result:
            return
        self._rendered_result = game
        
        header = self.query_one("#game-header", Static)
        cheat_list = self.query_one("#cheat-list", Vertical)
        await cheat_list.remove_children()
        
        if game is None:
            header.display = False
            header.update("")
            return
        
        info = get_game_header_info(game)
        lines = [info["name"], f"{info['titleid']}    {info['slug']}", f"{info['count']}    {info['received']}"]
        if info["artwork"]:
            lines.append(info["artwork"])
        header.update("\n".join(lines))
        header.display = True
        
        if game.cheats:
            await cheat_list.mount_all(
                [CheatFileCard(cheat, index) for index, cheat in enumerate(game.cheats)]
            )
        log.debug("Result rendered", game=game.name, cards=len(game.cheats))
