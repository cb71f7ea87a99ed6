"""
Flashcard entity for studying a deck.
"""

from dataclasses import dataclass
from typing import ClassVar, TypedDict

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.value_objects import DeckId, FlashcardId, UserId


class FlashcardInfo(TypedDict):
    """Serialized snapshot of a flashcard."""

    id: int
    question: str
    answer: str
    creatorId: int  # noqa: N815
    deckId: int  # noqa: N815


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    Question/answer card belonging to a deck.

    Business Rules:
    - The question is fixed once the card exists, only the answer can change
    - Creator and deck are stored as plain IDs
    """

    id: FlashcardId
    question: str
    answer: str
    creator_id: UserId
    deck_id: DeckId

    content_fields: ClassVar[frozenset[str]] = frozenset({"answer"})

    def update_answer(self, answer: str) -> None:
        """
        Update the answer.

        Args:
            answer: New answer text
        """
        self.answer = answer

    def serialize(self) -> FlashcardInfo:
        """Snapshot every field of this flashcard as plain data."""
        return FlashcardInfo(
            id=self.id.value,
            question=self.question,
            answer=self.answer,
            creatorId=self.creator_id.value,
            deckId=self.deck_id.value,
        )

    @classmethod
    def create(
        cls,
        question: str,
        answer: str,
        creator_id: UserId,
        deck_id: DeckId,
    ) -> "Flashcard":
        """Create a new flashcard (ID will be 0 until persisted)."""
        return cls(
            id=FlashcardId.generate(),
            question=question,
            answer=answer,
            creator_id=creator_id,
            deck_id=deck_id,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        question: str,
        answer: str,
        creator_id: UserId,
        deck_id: DeckId,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            question=question,
            answer=answer,
            creator_id=creator_id,
            deck_id=deck_id,
        )
