"""
Learning bounded context - Domain layer.

Aggregates:
- StudyGroup: a named group that owns decks
- Deck: a named set of flashcards inside a study group
- Flashcard: a question/answer study card inside a deck
"""

from .entities.deck import Deck, DeckInfo
from .entities.flashcard import Flashcard, FlashcardInfo
from .entities.study_group import StudyGroup, StudyGroupInfo

__all__ = [
    "Deck",
    "DeckInfo",
    "Flashcard",
    "FlashcardInfo",
    "StudyGroup",
    "StudyGroupInfo",
]
