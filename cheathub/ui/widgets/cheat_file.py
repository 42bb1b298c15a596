"""Collapsible card for a single cheat file."""

from typing import ClassVar

from typing_extensions import override

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from cheathub.models.cheats import CheatFile


def get_cheat_file_display_info(cheat: CheatFile, index: int) -> dict[str, str]:
    """Get display information for a cheat file card.

    Args:
        cheat: The cheat file
        index: Zero-based position in the result

    Returns:
        Dictionary with the header, metadata and titles text
    """
    return {
        "header": f"#{cheat.id}  Cheat file {index + 1}",
        "credits": f"Author: {cheat.credits}",
        "buildid": f"BuildID: {cheat.buildid}",
        "description": cheat.description or "",
        "titles": "\n".join(f"• {title}" for title in cheat.titles),
    }


class CheatFileCard(Vertical):
    """One cheat file: header toggles the body, body has a copy button.

    The toggle and copy buttons carry the cheat id as their ``name`` so the
    screen can route presses without a widget id per cheat.
    """

    DEFAULT_CSS: ClassVar[str] = """
    CheatFileCard {
        height: auto;
        margin-bottom: 1;
        border: round $primary-darken-2;
    }

    CheatFileCard .cheat-toggle {
        width: 100%;
    }

    CheatFileCard .cheat-body {
        display: none;
        height: auto;
        padding: 0 1;
    }

    CheatFileCard.-expanded .cheat-body {
        display: block;
    }

    CheatFileCard .cheat-meta {
        color: $text-muted;
    }

    CheatFileCard .cheat-content {
        background: $boost;
        color: $success;
        padding: 1;
        margin-top: 1;
        max-height: 20;
        overflow-y: auto;
    }

    CheatFileCard .copy-row {
        height: auto;
        margin-top: 1;
    }
    """

    def __init__(self, cheat: CheatFile, index: int) -> None:
        super().__init__()
        self.cheat = cheat
        self.index = index
        self._expanded = False
        self._copied = False

    @override
    def compose(self) -> ComposeResult:
        info = get_cheat_file_display_info(self.cheat, self.index)
        yield Button(f"▸ {info['header']}", name=self.cheat.id, classes="cheat-toggle")
        with Vertical(classes="cheat-body"):
            yield Static(info["credits"], markup=False, classes="cheat-meta")
            yield Static(info["buildid"], markup=False, classes="cheat-meta")
            if info["description"]:
                yield Static(info["description"], markup=False, classes="cheat-description")
            if info["titles"]:
                yield Static("Included cheats:", classes="cheat-meta")
                yield Static(info["titles"], markup=False, classes="cheat-titles")
            with Horizontal(classes="copy-row"):
                yield Button("Copy", name=self.cheat.id, classes="copy-button", variant="default")
            yield Static(self.cheat.content, markup=False, classes="cheat-content")

    def on_mount(self) -> None:
        self._apply_state()

    def set_state(self, expanded: bool, copied: bool) -> None:
        """Reflect the disclosure state for this cheat."""
        if expanded == self._expanded and copied == self._copied:
            return
        self._expanded = expanded
        self._copied = copied
        self._apply_state()

    def _apply_state(self) -> None:
        self.set_class(self._expanded, "-expanded")
        header = get_cheat_file_display_info(self.cheat, self.index)["header"]
        for toggle in self.query(".cheat-toggle").results(Button):
            toggle.label = f"{'▾' if self._expanded else '▸'} {header}"
        for copy_button in self.query(".copy-button").results(Button):
            copy_button.label = "✔ Copied!" if self._copied else "Copy"
