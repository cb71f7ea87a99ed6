"""Deterministic dict-backed storage driver for tests and local development."""

import dataclasses
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from flashdeck.application.common.result import Success
from flashdeck.application.storage.outcomes import StorageResult, not_found
from flashdeck.domain.common.value_objects import (
    DeckId,
    FlashcardId,
    StudyGroupId,
    UserId,
)
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.study_group import StudyGroup

E = TypeVar("E", User, StudyGroup, Deck, Flashcard)


class _InMemoryTable(Generic[E]):
    """
    One table of entities keyed by ID.

    Entities are copied on the way in and out, so callers mutating what
    they got back never change stored state without calling update.
    """

    def __init__(self, noun: str, merge: Callable[[E, E], E]) -> None:
        self.noun = noun
        self.merge = merge
        self.rows: dict[int, E] = {}
        self.next_id = 1
        self.lock = threading.Lock()

    def get(self, entity_id: int) -> StorageResult[E]:
        with self.lock:
            row = self.rows.get(entity_id)
        if row is None:
            return not_found(f"Could not find {self.noun} with ID {entity_id}")
        return Success(dataclasses.replace(row))

    def create(self, build: Callable[[int], E]) -> StorageResult[E]:
        with self.lock:
            entity_id = self.next_id
            self.next_id += 1
            row = build(entity_id)
            self.rows[entity_id] = row
        return Success(dataclasses.replace(row))

    def delete(self, entity_id: int) -> StorageResult[None]:
        with self.lock:
            if self.rows.pop(entity_id, None) is None:
                return not_found(f"Could not find {self.noun} with ID {entity_id}")
        return Success(None)

    def update(self, entity: E) -> StorageResult[E]:
        entity_id = entity.id.value
        with self.lock:
            row = self.rows.get(entity_id)
            if row is None:
                return not_found(f"Could not find {self.noun} with ID {entity_id}")
            row = self.merge(row, entity)
            self.rows[entity_id] = row
        return Success(dataclasses.replace(row))

    def clear(self) -> None:
        with self.lock:
            self.rows.clear()
            self.next_id = 1


class InMemoryStorageDriver:
    """
    Storage driver that keeps everything in process memory.

    IDs are assigned from 1 upwards per entity type. Updates only apply the
    entity's content field, like the SQL driver. Nothing here ever settles as
    ``InternalFailure``.
    """

    def __init__(self) -> None:
        self.users: _InMemoryTable[User] = _InMemoryTable(
            "user", lambda stored, new: dataclasses.replace(stored, username=new.username)
        )
        self.study_groups: _InMemoryTable[StudyGroup] = _InMemoryTable(
            "study group",
            lambda stored, new: dataclasses.replace(stored, group_name=new.group_name),
        )
        self.decks: _InMemoryTable[Deck] = _InMemoryTable(
            "deck", lambda stored, new: dataclasses.replace(stored, deck_name=new.deck_name)
        )
        self.flashcards: _InMemoryTable[Flashcard] = _InMemoryTable(
            "flashcard", lambda stored, new: dataclasses.replace(stored, answer=new.answer)
        )

    def setup(self) -> None:
        """Nothing to connect to."""

    def reset(self) -> None:
        """Drop every stored entity and restart ID assignment."""
        for table in (self.users, self.study_groups, self.decks, self.flashcards):
            table.clear()

    def get_user(self, user_id: int) -> StorageResult[User]:
        return self.users.get(user_id)

    def create_user(self, username: str) -> StorageResult[User]:
        return self.users.create(lambda new_id: User.create_with_id(UserId(new_id), username))

    def delete_user(self, user_id: int) -> StorageResult[None]:
        return self.users.delete(user_id)

    def update_user(self, user: User) -> StorageResult[User]:
        return self.users.update(user)

    def get_study_group(self, group_id: int) -> StorageResult[StudyGroup]:
        return self.study_groups.get(group_id)

    def create_study_group(self, group_name: str) -> StorageResult[StudyGroup]:
        return self.study_groups.create(
            lambda new_id: StudyGroup.create_with_id(StudyGroupId(new_id), group_name)
        )

    def delete_study_group(self, group_id: int) -> StorageResult[None]:
        return self.study_groups.delete(group_id)

    def update_study_group(self, study_group: StudyGroup) -> StorageResult[StudyGroup]:
        return self.study_groups.update(study_group)

    def get_deck(self, deck_id: int) -> StorageResult[Deck]:
        return self.decks.get(deck_id)

    def create_deck(self, deck_name: str, creator_id: int, group_id: int) -> StorageResult[Deck]:
        return self.decks.create(
            lambda new_id: Deck.create_with_id(
                DeckId(new_id), deck_name, UserId(creator_id), StudyGroupId(group_id)
            )
        )

    def delete_deck(self, deck_id: int) -> StorageResult[None]:
        return self.decks.delete(deck_id)

    def update_deck(self, deck: Deck) -> StorageResult[Deck]:
        return self.decks.update(deck)

    def get_flashcard(self, flashcard_id: int) -> StorageResult[Flashcard]:
        return self.flashcards.get(flashcard_id)

    def create_flashcard(
        self, question: str, answer: str, creator_id: int, deck_id: int
    ) -> StorageResult[Flashcard]:
        return self.flashcards.create(
            lambda new_id: Flashcard.create_with_id(
                FlashcardId(new_id), question, answer, UserId(creator_id), DeckId(deck_id)
            )
        )

    def delete_flashcard(self, flashcard_id: int) -> StorageResult[None]:
        return self.flashcards.delete(flashcard_id)

    def update_flashcard(self, flashcard: Flashcard) -> StorageResult[Flashcard]:
        return self.flashcards.update(flashcard)
