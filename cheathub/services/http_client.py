"""HTTP client service for the CheatSlips JSON API."""

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from .errors import TransportError

log = structlog.stdlib.get_logger()


@dataclass(frozen=True)
class ApiResponse:
    """Status and decoded body of an API call."""
    status_code: int
    reason_phrase: str
    body: Any  # None when the body was empty or not JSON
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpClientService:
    """HTTP client service for JSON requests against one API base URL.

    Requests are sent once; there is no retry or rate limiting. Anything that
    keeps a request from completing is raised as ``TransportError``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client service.

        Args:
            base_url: API root, e.g. https://www.cheatslips.com/api/v1
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            transport: Optional transport override (used by tests)
        """
        self.base_url = base_url
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            headers={
                "User-Agent": "CheatHub/0.1.0"
            },
            follow_redirects=True,
            verify=verify_ssl,
            transport=transport,
        )

        log.info(
            "HTTP client service initialized",
            base_url=base_url,
            timeout=timeout,
            verify_ssl=verify_ssl
        )

    async def request_json(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        json: Any = None,
    ) -> ApiResponse:
        """Send a request and decode the JSON response.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            headers: Optional additional headers
            json: Optional JSON request body

        Returns:
            The response status and decoded body, whatever the status code

        Raises:
            TransportError: If the request could not complete
        """
        log.debug("Making HTTP request", method=method, path=path)

        try:
            response = await self._client.request(
                method,
                path,
                headers=headers,
                json=json,
            )
        except httpx.RequestError as e:
            raw = str(e) or type(e).__name__
            url = str(e.request.url) if _has_request(e) else f"{self.base_url}{path}"
            log.warning(
                "HTTP request failed",
                method=method,
                url=url,
                error=raw,
                error_type=type(e).__name__
            )
            raise TransportError(raw, original_error=e, url=url) from e

        body: Any = None
        if response.content:
            try:
                body = response.json()
            except ValueError as e:
                log.warning(
                    "Response body is not JSON",
                    url=str(response.url),
                    status_code=response.status_code,
                    error=str(e)
                )

        log.info(
            "HTTP request completed",
            method=method,
            url=str(response.url),
            status_code=response.status_code,
            content_length=len(response.content)
        )

        return ApiResponse(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            body=body,
            url=str(response.url),
        )

    async def close(self) -> None:
        """Close the HTTP client and clean up resources."""
        await self._client.aclose()
        log.info("HTTP client closed")

    async def __aenter__(self) -> "HttpClientService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type[Exception] | None, exc_val: Exception | None, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


def _has_request(error: httpx.RequestError) -> bool:
    # httpx raises RuntimeError from .request when the error was built without one
    try:
        _ = error.request
    except RuntimeError:
        return False
    return True
