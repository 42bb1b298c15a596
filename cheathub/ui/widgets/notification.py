"""Banner widget showing the live notification of one channel."""

from typing import ClassVar

from textual.widgets import Static

from cheathub.models.notification import Notification, Severity

SEVERITY_ICONS: dict[Severity, str] = {
    Severity.SUCCESS: "✔",
    Severity.ERROR: "✖",
    Severity.INFO: "ℹ",
}


class NotificationBanner(Static):
    """Shows a notification, or nothing when the channel is empty."""

    DEFAULT_CSS: ClassVar[str] = """
    NotificationBanner {
        display: none;
        height: auto;
        padding: 0 1;
        margin: 1 0;
        border: round $primary;
    }

    NotificationBanner.-success {
        border: round $success;
        color: $success;
    }

    NotificationBanner.-error {
        border: round $error;
        color: $error;
    }

    NotificationBanner.-info {
        border: round $accent;
        color: $accent;
    }
    """

    def __init__(self, id: str | None = None) -> None:
        super().__init__("", markup=False, id=id)
        self._notification: Notification | None = None

    @property
    def notification(self) -> Notification | None:
        return self._notification

    def show_notification(self, notification: Notification | None) -> None:
        """Display a notification, or hide the banner for None."""
        if notification is self._notification:
            return
        self._notification = notification
        for severity in Severity:
            self.remove_class(f"-{severity.value}")

        if notification is None:
            self.update("")
            self.display = False
            return

        self.add_class(f"-{notification.severity.value}")
        self.update(f"{SEVERITY_ICONS[notification.severity]} {notification.text}")
        self.display = True
