"""Cheat catalog query: fetches the cheat files for one game build."""

from collections.abc import Callable, Mapping
from urllib.parse import quote

import structlog

from cheathub.models.cheats import GameResult, QueryInput, Token
from cheathub.models.notification import Channel, Severity
from cheathub.models.result import Err, Ok, Outcome

from .errors import (
    ApiError,
    MalformedResponseError,
    TransportError,
    ValidationError,
    describe_transport_error,
    extract_api_error_message,
    log_app_error,
)
from .http_client import HttpClientService
from .notifications import NotificationCenter

log = structlog.stdlib.get_logger()


def cheats_path(title_id: str, build_id: str) -> str:
    """Path of the cheats resource, with both identifiers URL-encoded."""
    return f"/cheats/{quote(title_id, safe='')}/{quote(build_id, safe='')}"


class CheatCatalogQuery:
    """Runs authenticated cheat lookups and reports their outcome.

    The result itself is handed to ``on_result``: ``None`` just before the
    request goes out, then the parsed ``GameResult`` if one is stored.
    """

    def __init__(
        self,
        http_client: HttpClientService,
        notifications: NotificationCenter,
        on_result: Callable[[GameResult | None], None],
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._http_client = http_client
        self._notifications = notifications
        self._on_result = on_result
        self._on_change = on_change
        self._in_flight = 0

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    def _reject(self, error: ValidationError) -> Err:
        log_app_error(error, operation="fetch_cheats", component="cheat_catalog")
        self._notifications.post(Channel.QUERY, Severity.ERROR, error.message)
        return Err(error)

    async def fetch_cheats(self, token: Token | None, query: QueryInput) -> Outcome[GameResult]:
        """Fetch the cheat files for a title/build pair.

        Args:
            token: Current API token; the lookup is refused without one
            query: Title and build identifiers

        Returns:
            Ok with the stored result, or Err with the error that was notified
        """
        if token is None:
            return self._reject(ValidationError("Please get an API token first", field="token"))
        title_id = query.title_id.strip()
        if not title_id:
            return self._reject(ValidationError("Please enter a TitleId", field="title_id"))
        build_id = query.build_id.strip()
        if not build_id:
            return self._reject(ValidationError("Please enter a BuildID", field="build_id"))

        self._in_flight += 1
        self._notifications.clear(Channel.QUERY)
        self._on_result(None)
        self._changed()
        log.info("Requesting cheats", title_id=title_id, build_id=build_id)

        try:
            response = await self._http_client.request_json(
                "GET",
                cheats_path(title_id, build_id),
                headers={"Accept": "application/json", "X-API-TOKEN": token.token},
            )
        except TransportError as e:
            log_app_error(e, operation="fetch_cheats", component="cheat_catalog")
            self._notifications.post(
                Channel.QUERY,
                Severity.ERROR,
                describe_transport_error("Network error while requesting cheats", e),
            )
            return Err(e)
        finally:
            self._in_flight -= 1
            self._changed()

        if not response.ok:
            error = ApiError(
                extract_api_error_message(response.body, response.status_code, response.reason_phrase),
                status_code=response.status_code,
                url=response.url,
            )
            log_app_error(error, operation="fetch_cheats", component="cheat_catalog")
            self._notifications.post(Channel.QUERY, Severity.ERROR, f"Failed to get cheats: {error.message}")
            return Err(error)

        try:
            if not isinstance(response.body, Mapping):
                raise TypeError("response body is not an object")
            result = GameResult.from_dict(response.body)
        except TypeError as e:
            error = MalformedResponseError(
                "Received cheat data in an invalid format",
                status_code=response.status_code,
                url=response.url,
            )
            error.technical_details = f"{error.technical_details}\n{e}"
            log_app_error(error, operation="fetch_cheats", component="cheat_catalog")
            self._notifications.post(Channel.QUERY, Severity.ERROR, error.message)
            return Err(error)

        self._on_result(result)
        game_name = result.name or title_id
        if result.cheats:
            log.info("Cheats received", game=game_name, cheats=len(result.cheats), count=result.count)
            self._notifications.post(
                Channel.QUERY,
                Severity.SUCCESS,
                f'Found {len(result.cheats)} cheat files for "{game_name}"',
            )
        else:
            log.info("No cheats for build", game=game_name, build_id=build_id)
            self._notifications.post(
                Channel.QUERY,
                Severity.INFO,
                f'No cheats found for "{game_name}" (BuildID: {build_id})',
            )
        return Ok(result)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
