"""Tests for the pure display helpers used by the screens."""

from cheathub.models import CheatFile, GameResult, Token
from cheathub.ui.screens.catalog import format_token_panel, get_game_header_info
from cheathub.ui.widgets.cheat_file import get_cheat_file_display_info

from helpers import GAME_X


def test_game_header_shows_advisory_and_received_counts() -> None:
    game = GameResult.from_dict({**GAME_X, "count": 7})
    
    info = get_game_header_info(game)
    
    assert info["name"] == "Game X"
    assert info["titleid"] == "TitleID: 0100A3D008C5C000"
    assert info["slug"] == "Slug: game-x"
    assert info["count"] == "Total cheat files: 7"
    assert info["received"] == "Received: 2"
    assert info["artwork"] == "Artwork: https://img.test/banner.png"


def test_game_header_uses_image_when_no_banner() -> None:
    game = GameResult.from_dict({"name": "G", "cheats": [], "image": "https://img.test/cover.png"})
    assert get_game_header_info(game)["artwork"] == "Artwork: https://img.test/cover.png"
    
    bare = GameResult.from_dict({"name": "G", "cheats": []})
    assert get_game_header_info(bare)["artwork"] == ""


def test_cheat_file_display_info() -> None:
    cheat = CheatFile(
        id="42",
        credits="alice",
        buildid="ABCD",
        content="[Infinite HP]",
        titles=("Infinite HP", "Max Gold"),
        description="Main cheats",
    )
    
    info = get_cheat_file_display_info(cheat, 0)
    
    assert info["header"] == "#42  Cheat file 1"
    assert info["credits"] == "Author: alice"
    assert info["buildid"] == "BuildID: ABCD"
    assert info["description"] == "Main cheats"
    assert info["titles"] == "• Infinite HP\n• Max Gold"


def test_cheat_file_display_info_without_optional_fields() -> None:
    cheat = CheatFile(id="7", credits="", buildid="ABCD", content="")
    
    info = get_cheat_file_display_info(cheat, 3)
    
    assert info["header"] == "#7  Cheat file 4"
    assert info["description"] == ""
    assert info["titles"] == ""


def test_token_panel_shows_raw_token() -> None:
    panel = format_token_panel(Token(token="T1", expiration="soon"))
    
    assert panel == "Current API Token (valid until soon):\nT1"


class TestCatalogScreenWiring:
    """Structural checks on how the catalog screen reaches the controller."""

    def test_every_input_maps_to_a_controller_setter(self) -> None:
        from cheathub.services.controller import CheatHubController
        from cheathub.ui.screens import CatalogScreen

        for input_id, setter in CatalogScreen.INPUT_FIELDS.items():
            assert input_id.startswith("input-")
            assert callable(getattr(CheatHubController, setter, None)), setter

    def test_actions_have_key_bindings(self) -> None:
        from cheathub.ui.screens import CatalogScreen

        actions = {binding.action for binding in CatalogScreen.BINDINGS}

        assert {"request_token", "request_cheats"} <= actions
        for action in actions:
            assert hasattr(CatalogScreen, f"action_{action}")
