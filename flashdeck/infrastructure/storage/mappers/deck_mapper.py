"""Mapper for Deck ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import DeckId, StudyGroupId, UserId
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.models import Deck as DeckORM


class DeckMapper:
    """Mapper for Deck ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: DeckORM) -> Deck:
        """Convert ORM model to domain entity."""
        return Deck.create_with_id(
            id=DeckId(orm_model.id),
            deck_name=orm_model.deck_name,
            creator_id=UserId(orm_model.creator_id),
            group_id=StudyGroupId(orm_model.group_id),
        )

    def to_orm(self, domain_entity: Deck, orm_model: DeckORM | None = None) -> DeckORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing: creator and group are fixed once stored
            orm_model.deck_name = domain_entity.deck_name
            return orm_model

        return DeckORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            deck_name=domain_entity.deck_name,
            creator_id=domain_entity.creator_id.value,
            group_id=domain_entity.group_id.value,
        )
