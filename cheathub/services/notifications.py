"""Per-channel transient notifications with automatic expiry."""

import asyncio
from collections.abc import Callable

import structlog

from cheathub.models.notification import Channel, Notification, Severity

log = structlog.stdlib.get_logger()


class NotificationCenter:
    """Holds at most one live notification per channel.

    Posting to a channel replaces its notification and restarts the channel's
    expiry timer; the previous timer is cancelled so it can never clear the
    newer message. Channels never affect each other.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the notification center.

        Args:
            timeout: Seconds before a posted notification is cleared
            on_change: Called after any notification is set or cleared
        """
        self.timeout = timeout
        self._on_change = on_change
        self._current: dict[Channel, Notification] = {}
        self._timers: dict[Channel, asyncio.Task[None]] = {}

    def get(self, channel: Channel) -> Notification | None:
        """Get the live notification on a channel, if any."""
        return self._current.get(channel)

    def post(self, channel: Channel, severity: Severity, text: str) -> Notification:
        """Replace the channel's notification and restart its expiry timer.

        Must be called from a running event loop.
        """
        self._cancel_timer(channel)
        notification = Notification(channel=channel, severity=severity, text=text)
        self._current[channel] = notification
        self._timers[channel] = asyncio.get_running_loop().create_task(
            self._expire(channel, notification),
            name=f"notification-expiry-{channel.value}",
        )
        log.debug("Notification posted", channel=channel.value, severity=severity.value)
        self._changed()
        return notification

    def clear(self, channel: Channel) -> None:
        """Remove the channel's notification and cancel its timer."""
        self._cancel_timer(channel)
        if self._current.pop(channel, None) is not None:
            log.debug("Notification cleared", channel=channel.value)
            self._changed()

    def shutdown(self) -> None:
        """Cancel all pending expiry timers."""
        for channel in list(self._timers):
            self._cancel_timer(channel)

    async def _expire(self, channel: Channel, notification: Notification) -> None:
        await asyncio.sleep(self.timeout)
        self._timers.pop(channel, None)
        # A newer post would have cancelled this task; compare anyway
        if self._current.get(channel) is notification:
            del self._current[channel]
            log.debug("Notification expired", channel=channel.value)
            self._changed()

    def _cancel_timer(self, channel: Channel) -> None:
        task = self._timers.pop(channel, None)
        if task is not None and not task.done():
            task.cancel()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
