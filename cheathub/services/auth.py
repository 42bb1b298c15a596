"""Authentication session: exchanges credentials for an API token."""

from collections.abc import Callable, Mapping

import structlog

from cheathub.models.cheats import Credentials, Token
from cheathub.models.notification import Channel, Severity
from cheathub.models.result import Err, Ok, Outcome

from .errors import (
    ApiError,
    TransportError,
    ValidationError,
    describe_transport_error,
    extract_api_error_message,
    log_app_error,
)
from .http_client import HttpClientService
from .notifications import NotificationCenter

log = structlog.stdlib.get_logger()

TOKEN_PATH = "/token"


def format_expiration(token: Token) -> str:
    """Render a token's expiration in local time for display."""
    expires_at = token.expires_at
    if expires_at is None:
        return token.expiration or "unknown"
    return expires_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")


class AuthSession:
    """Owns the current API token and the call that obtains it.

    Each call to ``authenticate`` ends in exactly one replace-or-clear of the
    token. The previous token stays readable while a call is in flight.
    Overlapping calls are not cancelled; whichever resolves last wins.
    """

    def __init__(
        self,
        http_client: HttpClientService,
        notifications: NotificationCenter,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._http_client = http_client
        self._notifications = notifications
        self._on_change = on_change
        self._token: Token | None = None
        self._in_flight = 0

    @property
    def token(self) -> Token | None:
        return self._token

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    async def authenticate(self, credentials: Credentials) -> Outcome[Token]:
        """Exchange credentials for a token.

        Args:
            credentials: Email and password as entered

        Returns:
            Ok with the new token, or Err with the error that was notified
        """
        if not credentials.is_complete():
            error = ValidationError("Please enter your email and password", field="credentials")
            log_app_error(error, operation="authenticate", component="auth")
            self._notifications.post(Channel.AUTH, Severity.ERROR, error.message)
            return Err(error)

        self._in_flight += 1
        self._notifications.clear(Channel.AUTH)
        self._changed()
        log.info("Requesting API token", email=credentials.email)

        try:
            response = await self._http_client.request_json(
                "POST",
                TOKEN_PATH,
                json={"email": credentials.email, "password": credentials.password},
            )
        except TransportError as e:
            self._token = None
            log_app_error(e, operation="authenticate", component="auth")
            self._notifications.post(
                Channel.AUTH,
                Severity.ERROR,
                describe_transport_error("Network error while requesting the token", e),
            )
            return Err(e)
        finally:
            self._in_flight -= 1
            self._changed()

        body = response.body
        if response.ok and isinstance(body, Mapping) and body.get("token"):
            token = Token(token=str(body["token"]), expiration=str(body.get("expiration") or ""))
            self._token = token
            log.info("API token acquired", token_length=len(token.token), expiration=token.expiration)
            self._notifications.post(
                Channel.AUTH,
                Severity.SUCCESS,
                f"Token acquired! Valid until: {format_expiration(token)}",
            )
            return Ok(token)

        self._token = None
        error = ApiError(
            extract_api_error_message(body, response.status_code, response.reason_phrase),
            status_code=response.status_code,
            url=response.url,
        )
        log_app_error(error, operation="authenticate", component="auth")
        self._notifications.post(Channel.AUTH, Severity.ERROR, f"Failed to get token: {error.message}")
        return Err(error)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
