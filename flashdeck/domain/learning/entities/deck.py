"""
Deck entity grouping flashcards inside a study group.
"""

from dataclasses import dataclass
from typing import ClassVar, TypedDict

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.value_objects import DeckId, StudyGroupId, UserId


class DeckInfo(TypedDict):
    """Serialized snapshot of a deck."""

    id: int
    deckName: str  # noqa: N815
    creatorId: int  # noqa: N815
    groupId: int  # noqa: N815


@dataclass
class Deck(Entity[DeckId]):
    """
    Deck of flashcards.

    Business Rules:
    - A deck records the user who created it and the group it belongs to
    - Creator and group are stored as plain IDs, nothing checks they exist
    - Only the deck name can be changed after creation
    """

    id: DeckId
    deck_name: str
    creator_id: UserId
    group_id: StudyGroupId

    content_fields: ClassVar[frozenset[str]] = frozenset({"deck_name"})

    def rename(self, deck_name: str) -> None:
        """
        Replace the deck name.

        Args:
            deck_name: New name of the deck
        """
        self.deck_name = deck_name

    def serialize(self) -> DeckInfo:
        """Snapshot every field of this deck as plain data."""
        return DeckInfo(
            id=self.id.value,
            deckName=self.deck_name,
            creatorId=self.creator_id.value,
            groupId=self.group_id.value,
        )

    @classmethod
    def create(cls, deck_name: str, creator_id: UserId, group_id: StudyGroupId) -> "Deck":
        """Create a new deck (ID will be 0 until persisted)."""
        return cls(
            id=DeckId.generate(),
            deck_name=deck_name,
            creator_id=creator_id,
            group_id=group_id,
        )

    @classmethod
    def create_with_id(
        cls,
        id: DeckId,
        deck_name: str,
        creator_id: UserId,
        group_id: StudyGroupId,
    ) -> "Deck":
        """Reconstitute a deck from persistence."""
        return cls(id=id, deck_name=deck_name, creator_id=creator_id, group_id=group_id)
