"""Mapper for Flashcard ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import DeckId, FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            question=orm_model.question,
            answer=orm_model.answer,
            creator_id=UserId(orm_model.creator_id),
            deck_id=DeckId(orm_model.deck_id),
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing: only the answer is writable, even though the
            # entity carries question, creator and deck along
            orm_model.answer = domain_entity.answer
            return orm_model

        return FlashcardORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            question=domain_entity.question,
            answer=domain_entity.answer,
            creator_id=domain_entity.creator_id.value,
            deck_id=domain_entity.deck_id.value,
        )
