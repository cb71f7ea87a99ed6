"""
Result type for storage outcomes.

Drivers settle every operation as a value instead of raising: ``Success``
wraps what the operation produced, ``Failure`` wraps why it didn't.

Example:
    match facade.get_deck(3):
        case Success(value=deck):
            print(deck.deck_name)
        case Failure(error=NotFound(message=message)):
            print(message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation completed; ``value`` is its product (None for deletes)."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Operation did not complete; ``error`` says why."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raises ValueError - Failure has no value."""
        raise ValueError(f"Cannot get value from Failure result: {self.error!r}")

    def unwrap_error(self) -> E:
        return self.error


Result = Success[T] | Failure[E]
