"""Clipboard copy action for cheat file contents."""

from typing import Protocol

import structlog

from .disclosure import ResultDisclosureState
from .errors import ClipboardError, log_app_error

log = structlog.stdlib.get_logger()


class ClipboardWriter(Protocol):
    """Write-only text clipboard."""

    async def write_text(self, text: str) -> None: ...


class ClipboardService:
    """Copies cheat contents and flags the entry as copied.

    A failed write is logged and otherwise ignored: no notification, no
    copied mark, nothing raised to the caller.
    """

    def __init__(self, writer: ClipboardWriter, disclosure: ResultDisclosureState) -> None:
        self._writer = writer
        self._disclosure = disclosure

    async def copy(self, content: str, cheat_id: str) -> bool:
        """Copy content to the clipboard.

        Returns:
            True if the clipboard write succeeded
        """
        try:
            await self._writer.write_text(content)
        except Exception as e:
            error = e if isinstance(e, ClipboardError) else ClipboardError("Clipboard write failed", original_error=e)
            log_app_error(error, operation="copy", component="clipboard")
            return False

        log.debug("Cheat content copied", cheat_id=cheat_id, length=len(content))
        self._disclosure.mark_copied(cheat_id)
        return True
