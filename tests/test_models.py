"""Tests for cheat catalog data models."""

from datetime import datetime, timezone

import pytest
from hypothesis import given, strategies as st

from cheathub.models import CheatFile, Credentials, GameResult, Token

from helpers import GAME_X


class TestGameResultParsing:
    def test_full_payload(self) -> None:
        game = GameResult.from_dict(GAME_X)
        
        assert game.name == "Game X"
        assert game.titleid == "0100A3D008C5C000"
        assert game.slug == "game-x"
        assert game.count == 2
        assert game.artwork_url == "https://img.test/banner.png"
        assert [cheat.id for cheat in game.cheats] == ["1", "2"]
        assert game.cheats[0].titles == ("Infinite HP", "Max Gold")
        assert game.cheats[1].description is None

    def test_missing_header_fields_default_to_empty(self) -> None:
        game = GameResult.from_dict({"name": "Game X", "count": 0, "cheats": []})
        
        assert game.titleid == ""
        assert game.slug == ""
        assert game.cheats == ()
        assert game.artwork_url is None

    @pytest.mark.parametrize("payload", [
        {"name": "Game X"},
        {"name": "Game X", "cheats": None},
        {"name": "Game X", "cheats": {"1": {}}},
        {"name": "Game X", "cheats": "none"},
        {"name": "Game X", "cheats": ["not an object"]},
    ])
    def test_rejects_missing_or_invalid_cheats(self, payload: dict[str, object]) -> None:
        with pytest.raises(TypeError):
            GameResult.from_dict(payload)

    @given(
        count=st.integers(min_value=0, max_value=500),
        cheat_count=st.integers(min_value=0, max_value=5),
    )
    def test_count_is_kept_as_reported(self, count: int, cheat_count: int) -> None:
        cheats = [{"id": str(i), "content": ""} for i in range(cheat_count)]
        game = GameResult.from_dict({"name": "G", "count": count, "cheats": cheats})
        
        assert game.count == count
        assert len(game.cheats) == cheat_count

    def test_image_used_when_no_banner(self) -> None:
        game = GameResult.from_dict({"cheats": [], "image": "https://img.test/cover.png"})
        assert game.artwork_url == "https://img.test/cover.png"


class TestCheatFile:
    def test_numeric_id_is_stringified(self) -> None:
        cheat = CheatFile.from_dict({"id": 7, "credits": "x", "buildid": "B", "content": "c"})
        assert cheat.id == "7"

    def test_string_titles_are_ignored(self) -> None:
        cheat = CheatFile.from_dict({"id": "1", "titles": "single"})
        assert cheat.titles == ()


class TestToken:
    def test_expiration_parsed_from_zulu_time(self) -> None:
        token = Token(token="T1", expiration="2030-01-01T00:00:00Z")
        assert token.expires_at == datetime(2030, 1, 1, tzinfo=timezone.utc)

    def test_unparseable_expiration(self) -> None:
        assert Token(token="T1", expiration="soon").expires_at is None
        assert Token(token="T1", expiration="").expires_at is None

    def test_repr_hides_token_value(self) -> None:
        assert "secret-value" not in repr(Token(token="secret-value", expiration=""))


class TestCredentials:
    @given(
        email=st.text(alphabet=" \t\n", max_size=5),
        password=st.text(max_size=10),
    )
    def test_blank_email_is_incomplete(self, email: str, password: str) -> None:
        assert not Credentials(email=email, password=password).is_complete()

    def test_complete_credentials(self) -> None:
        assert Credentials(email="a@b.com", password="pw").is_complete()

    def test_repr_hides_password(self) -> None:
        assert "hunter2" not in repr(Credentials(email="a@b.com", password="hunter2"))
