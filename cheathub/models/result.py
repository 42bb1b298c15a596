"""Explicit outcome types returned by awaited operations."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from cheathub.services.errors import AppError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the error that was reported to the user."""
    error: "AppError"

    @property
    def ok(self) -> bool:
        return False


Outcome = Ok[T] | Err
