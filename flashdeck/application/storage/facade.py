"""Storage facade used by the request handler."""

from typing import TypeVar

import structlog

from flashdeck.application.storage.outcomes import StorageResult, outcome_kind
from flashdeck.application.storage.protocols import StorageDriver
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.study_group import StudyGroup

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class StorageFacade:
    """
    Single entry point to storage for the rest of the application.

    Hides which driver is plugged in. Every operation passes straight through
    to the driver and returns its outcome untouched, so update operations
    hand back the entity as persisted. Errors a driver raises instead of
    returning are not caught here.
    """

    def __init__(self, driver: StorageDriver) -> None:
        """Initialize facade with the driver to delegate to."""
        self.driver = driver

    def _settled(
        self, operation: str, result: StorageResult[T], **context: object
    ) -> StorageResult[T]:
        logger.debug(
            "storage_operation", operation=operation, outcome=outcome_kind(result), **context
        )
        return result

    def setup(self) -> None:
        """
        Bootstrap the underlying store.

        Raises:
            StorageConnectionError: If the store can't be reached or synchronized
        """
        self.driver.setup()
        logger.info("storage_ready", driver=type(self.driver).__name__)

    # Users

    def get_user(self, user_id: int) -> StorageResult[User]:
        return self._settled("get_user", self.driver.get_user(user_id), user_id=user_id)

    def create_user(self, username: str) -> StorageResult[User]:
        return self._settled("create_user", self.driver.create_user(username))

    def delete_user(self, user_id: int) -> StorageResult[None]:
        return self._settled("delete_user", self.driver.delete_user(user_id), user_id=user_id)

    def update_user(self, user: User) -> StorageResult[User]:
        return self._settled("update_user", self.driver.update_user(user), user_id=user.id.value)

    # Study groups

    def get_study_group(self, group_id: int) -> StorageResult[StudyGroup]:
        return self._settled(
            "get_study_group", self.driver.get_study_group(group_id), group_id=group_id
        )

    def create_study_group(self, group_name: str) -> StorageResult[StudyGroup]:
        return self._settled("create_study_group", self.driver.create_study_group(group_name))

    def delete_study_group(self, group_id: int) -> StorageResult[None]:
        return self._settled(
            "delete_study_group", self.driver.delete_study_group(group_id), group_id=group_id
        )

    def update_study_group(self, study_group: StudyGroup) -> StorageResult[StudyGroup]:
        return self._settled(
            "update_study_group",
            self.driver.update_study_group(study_group),
            group_id=study_group.id.value,
        )

    # Decks

    def get_deck(self, deck_id: int) -> StorageResult[Deck]:
        return self._settled("get_deck", self.driver.get_deck(deck_id), deck_id=deck_id)

    def create_deck(self, deck_name: str, creator_id: int, group_id: int) -> StorageResult[Deck]:
        return self._settled(
            "create_deck",
            self.driver.create_deck(deck_name, creator_id, group_id),
            creator_id=creator_id,
            group_id=group_id,
        )

    def delete_deck(self, deck_id: int) -> StorageResult[None]:
        return self._settled("delete_deck", self.driver.delete_deck(deck_id), deck_id=deck_id)

    def update_deck(self, deck: Deck) -> StorageResult[Deck]:
        return self._settled("update_deck", self.driver.update_deck(deck), deck_id=deck.id.value)

    # Flashcards

    def get_flashcard(self, flashcard_id: int) -> StorageResult[Flashcard]:
        return self._settled(
            "get_flashcard", self.driver.get_flashcard(flashcard_id), flashcard_id=flashcard_id
        )

    def create_flashcard(
        self, question: str, answer: str, creator_id: int, deck_id: int
    ) -> StorageResult[Flashcard]:
        return self._settled(
            "create_flashcard",
            self.driver.create_flashcard(question, answer, creator_id, deck_id),
            creator_id=creator_id,
            deck_id=deck_id,
        )

    def delete_flashcard(self, flashcard_id: int) -> StorageResult[None]:
        return self._settled(
            "delete_flashcard",
            self.driver.delete_flashcard(flashcard_id),
            flashcard_id=flashcard_id,
        )

    def update_flashcard(self, flashcard: Flashcard) -> StorageResult[Flashcard]:
        return self._settled(
            "update_flashcard",
            self.driver.update_flashcard(flashcard),
            flashcard_id=flashcard.id.value,
        )
