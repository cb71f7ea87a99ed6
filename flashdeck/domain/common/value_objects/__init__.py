"""Common value objects shared across all domain modules."""

from .ids import DeckId, FlashcardId, StudyGroupId, UserId

__all__ = [
    "DeckId",
    "FlashcardId",
    "StudyGroupId",
    "UserId",
]
