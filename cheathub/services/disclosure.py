"""Expanded / recently-copied state for the cheat files of one result."""

import asyncio
from collections.abc import Callable

import structlog

log = structlog.stdlib.get_logger()


class ResultDisclosureState:
    """Tracks which cheat files are expanded and which were just copied.

    Entries are keyed by cheat file id. Expansion is independent per entry.
    The copied mark clears itself after ``copy_feedback_delay`` seconds.
    """

    def __init__(
        self,
        copy_feedback_delay: float = 2.0,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.copy_feedback_delay = copy_feedback_delay
        self._on_change = on_change
        self._expanded: set[str] = set()
        self._copied: set[str] = set()
        self._copy_timers: dict[str, asyncio.Task[None]] = {}

    @property
    def expanded(self) -> frozenset[str]:
        return frozenset(self._expanded)

    @property
    def copied(self) -> frozenset[str]:
        return frozenset(self._copied)

    def is_expanded(self, cheat_id: str) -> bool:
        return cheat_id in self._expanded

    def is_copied(self, cheat_id: str) -> bool:
        return cheat_id in self._copied

    def toggle_expand(self, cheat_id: str) -> bool:
        """Flip the expanded state of an entry.

        Returns:
            True if the entry is now expanded
        """
        if cheat_id in self._expanded:
            self._expanded.discard(cheat_id)
            expanded = False
        else:
            self._expanded.add(cheat_id)
            expanded = True
        self._changed()
        return expanded

    def mark_copied(self, cheat_id: str) -> None:
        """Put an entry in the copied state and schedule its removal.

        Must be called from a running event loop.
        """
        self._cancel_timer(cheat_id)
        self._copied.add(cheat_id)
        self._copy_timers[cheat_id] = asyncio.get_running_loop().create_task(
            self._unmark_later(cheat_id),
            name=f"copy-feedback-{cheat_id}",
        )
        self._changed()

    def reset(self) -> None:
        """Collapse everything and drop all copied marks."""
        for cheat_id in list(self._copy_timers):
            self._cancel_timer(cheat_id)
        self._expanded.clear()
        self._copied.clear()
        log.debug("Disclosure state reset")
        self._changed()

    async def _unmark_later(self, cheat_id: str) -> None:
        await asyncio.sleep(self.copy_feedback_delay)
        self._copy_timers.pop(cheat_id, None)
        if cheat_id in self._copied:
            self._copied.discard(cheat_id)
            self._changed()

    def _cancel_timer(self, cheat_id: str) -> None:
        task = self._copy_timers.pop(cheat_id, None)
        if task is not None and not task.done():
            task.cancel()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
