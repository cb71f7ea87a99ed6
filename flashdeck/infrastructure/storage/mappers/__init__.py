"""ORM ↔ Domain mappers for the SQLAlchemy storage driver."""

from .deck_mapper import DeckMapper
from .flashcard_mapper import FlashcardMapper
from .study_group_mapper import StudyGroupMapper
from .user_mapper import UserMapper

__all__ = ["DeckMapper", "FlashcardMapper", "StudyGroupMapper", "UserMapper"]
