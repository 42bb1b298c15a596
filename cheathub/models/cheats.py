"""Cheat catalog data models."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Credentials:
    """Account credentials, held in memory only."""
    email: str
    password: str

    def is_complete(self) -> bool:
        return bool(self.email.strip()) and bool(self.password.strip())

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"


@dataclass(frozen=True)
class Token:
    """Bearer token returned by the authentication endpoint."""
    token: str
    expiration: str  # ISO-8601 as sent by the server

    @property
    def expires_at(self) -> datetime | None:
        """Parsed expiration, or None if the server sent something unparseable."""
        if not self.expiration:
            return None
        try:
            return datetime.fromisoformat(self.expiration.replace("Z", "+00:00"))
        except ValueError:
            return None

    def __repr__(self) -> str:
        return f"Token(token=<{len(self.token)} chars>, expiration={self.expiration!r})"


@dataclass(frozen=True)
class QueryInput:
    """Game identifiers for a cheat lookup."""
    title_id: str
    build_id: str


@dataclass(frozen=True)
class CheatFile:
    """A single cheat-code bundle for one game build."""
    id: str
    credits: str
    buildid: str
    content: str
    titles: tuple[str, ...] = ()
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheatFile":
        """Build a cheat file from a decoded JSON object.
        
        Raises:
            TypeError: If data is not a JSON object
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"cheat entry must be an object, got {type(data).__name__}")
        
        raw_titles = data.get("titles")
        titles: tuple[str, ...] = ()
        if isinstance(raw_titles, Sequence) and not isinstance(raw_titles, str):
            titles = tuple(str(title) for title in raw_titles)
        
        description = data.get("description")
        return cls(
            id=str(data.get("id", "")),
            credits=_as_text(data.get("credits")),
            buildid=_as_text(data.get("buildid")),
            content=_as_text(data.get("content")),
            titles=titles,
            description=str(description) if description else None,
        )


@dataclass(frozen=True)
class GameResult:
    """Catalog response for one title/build query.
    
    ``count`` is what the server reports and is kept as-is; it is not
    reconciled with ``len(cheats)``.
    """
    name: str
    titleid: str
    slug: str
    count: int
    cheats: tuple[CheatFile, ...]
    banner: str | None = None
    image: str | None = None

    @property
    def artwork_url(self) -> str | None:
        """Banner if present, otherwise the cover image."""
        return self.banner or self.image

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameResult":
        """Build a game result from a decoded JSON object.
        
        Raises:
            TypeError: If ``cheats`` is missing, not a list, or holds non-objects
        """
        raw_cheats = data.get("cheats")
        if not isinstance(raw_cheats, list):
            raise TypeError("cheats must be a list")
        
        raw_count = data.get("count", 0)
        try:
            count = int(raw_count)
        except (TypeError, ValueError):
            count = 0
        
        return cls(
            name=_as_text(data.get("name")),
            titleid=_as_text(data.get("titleid")),
            slug=_as_text(data.get("slug")),
            count=count,
            cheats=tuple(CheatFile.from_dict(item) for item in raw_cheats),
            banner=data.get("banner") or None,
            image=data.get("image") or None,
        )


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)
