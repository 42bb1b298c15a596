"""Page-level controller wiring user actions to the cheat services."""

from collections.abc import Callable

import structlog

from cheathub.models.cheats import CheatFile, Credentials, GameResult, QueryInput, Token
from cheathub.models.config import AppConfig
from cheathub.models.notification import Channel, Notification
from cheathub.models.result import Outcome

from .auth import AuthSession
from .cheat_catalog import CheatCatalogQuery
from .clipboard import ClipboardService, ClipboardWriter
from .disclosure import ResultDisclosureState
from .http_client import HttpClientService
from .notifications import NotificationCenter

log = structlog.stdlib.get_logger()


class CheatHubController:
    """Owns all page state and exposes the actions the UI triggers.

    State held here: form inputs, the auth session (and its token), the
    current game result, its disclosure state and both notification channels.
    Listeners registered with ``subscribe`` are called after every change.
    """

    def __init__(
        self,
        http_client: HttpClientService,
        clipboard: ClipboardWriter,
        config: AppConfig | None = None,
    ) -> None:
        config = config or AppConfig()
        self._listeners: list[Callable[[], None]] = []

        self.email = ""
        self.password = ""
        self.title_id = ""
        self.build_id = ""
        self._game_result: GameResult | None = None

        self.notifications = NotificationCenter(
            timeout=config.notification_timeout,
            on_change=self._emit,
        )
        self.disclosure = ResultDisclosureState(
            copy_feedback_delay=config.copy_feedback_delay,
            on_change=self._emit,
        )
        self._auth = AuthSession(http_client, self.notifications, on_change=self._emit)
        self._catalog = CheatCatalogQuery(
            http_client,
            self.notifications,
            on_result=self._replace_game_result,
            on_change=self._emit,
        )
        self._clipboard = ClipboardService(clipboard, self.disclosure)

        log.info("CheatHub controller initialized")

    # State accessors

    @property
    def token(self) -> Token | None:
        return self._auth.token

    @property
    def game_result(self) -> GameResult | None:
        return self._game_result

    @property
    def auth_loading(self) -> bool:
        return self._auth.loading

    @property
    def query_loading(self) -> bool:
        return self._catalog.loading

    def notification(self, channel: Channel) -> Notification | None:
        return self.notifications.get(channel)

    def find_cheat(self, cheat_id: str) -> CheatFile | None:
        if self._game_result is None:
            return None
        for cheat in self._game_result.cheats:
            if cheat.id == cheat_id:
                return cheat
        return None

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Register a callback run after every state change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # Field edits

    def set_email(self, value: str) -> None:
        self.email = value

    def set_password(self, value: str) -> None:
        self.password = value

    def set_title_id(self, value: str) -> None:
        self.title_id = value

    def set_build_id(self, value: str) -> None:
        self.build_id = value

    # Actions

    async def request_token(self) -> Outcome[Token]:
        """Authenticate with the current email and password."""
        credentials = Credentials(email=self.email, password=self.password)
        return await self._auth.authenticate(credentials)

    async def request_cheats(self) -> Outcome[GameResult]:
        """Look up cheats for the current title and build ids."""
        query = QueryInput(title_id=self.title_id, build_id=self.build_id)
        return await self._catalog.fetch_cheats(self.token, query)

    def toggle_expand(self, cheat_id: str) -> bool:
        return self.disclosure.toggle_expand(cheat_id)

    async def copy(self, content: str, cheat_id: str) -> bool:
        """Copy a cheat's content to the clipboard."""
        return await self._clipboard.copy(content, cheat_id)

    async def copy_cheat(self, cheat_id: str) -> bool:
        """Copy the content of a cheat in the current result."""
        cheat = self.find_cheat(cheat_id)
        if cheat is None:
            log.warning("Copy requested for unknown cheat", cheat_id=cheat_id)
            return False
        return await self.copy(cheat.content, cheat_id)

    def shutdown(self) -> None:
        """Cancel pending notification and copy timers."""
        self.notifications.shutdown()
        self.disclosure.reset()
        log.info("CheatHub controller shut down")

    def _replace_game_result(self, result: GameResult | None) -> None:
        self._game_result = result
        self.disclosure.reset()

    def _emit(self) -> None:
        for listener in self._listeners:
            listener()
