"""Helpers shared by the CheatHub tests."""

import json
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from cheathub.services.http_client import HttpClientService

BASE_URL = "https://api.test/v1"

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response | Awaitable[httpx.Response]:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


class RecordingClipboard:
    """Clipboard writer that remembers what was written, or fails on demand."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.fail_with = fail_with
        self.writes: list[str] = []

    async def write_text(self, text: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.writes.append(text)


def json_response(status_code: int, body: Any) -> httpx.Response:
    return httpx.Response(status_code, json=body)


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)


def make_client(handler: Handler) -> tuple[HttpClientService, RecordingTransport]:
    transport = RecordingTransport(handler)
    client = HttpClientService(base_url=BASE_URL, timeout=5.0, transport=transport)
    return client, transport


GAME_X = {
    "name": "Game X",
    "titleid": "0100A3D008C5C000",
    "slug": "game-x",
    "banner": "https://img.test/banner.png",
    "count": 2,
    "cheats": [
        {
            "id": "1",
            "credits": "alice",
            "buildid": "421C5411B487EB4D",
            "description": "Main cheats",
            "titles": ["Infinite HP", "Max Gold"],
            "content": "[Infinite HP]\n04000000 00123456 0000270F",
        },
        {
            "id": "2",
            "credits": "bob",
            "buildid": "421C5411B487EB4D",
            "titles": ["Moon Jump"],
            "content": "[Moon Jump]\n80000040\n04000000 00ABCDEF 3F800000\n20000000",
        },
    ],
}
