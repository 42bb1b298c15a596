"""Clipboard writer backed by the terminal."""

from textual.app import App

import structlog

log = structlog.stdlib.get_logger()


class TerminalClipboard:
    """Writes text through Textual's OSC 52 clipboard support.

    Terminals that ignore OSC 52 drop the text silently; there is no way to
    detect that from here.
    """

    def __init__(self, app: App[None]) -> None:
        self._app = app

    async def write_text(self, text: str) -> None:
        self._app.copy_to_clipboard(text)
        log.debug("Text sent to terminal clipboard", length=len(text))
