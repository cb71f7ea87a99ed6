"""Protocol for storage drivers."""

from typing import Protocol

from flashdeck.application.storage.outcomes import StorageResult
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.study_group import StudyGroup


class StorageDriver(Protocol):
    """
    Operations a storage technology must provide.

    Every operation settles with ``Success`` or with a ``Failure`` carrying
    ``NotFound`` or ``InternalFailure``:

    - get: NotFound if the ID is absent, InternalFailure on any store error
    - create: the store assigns the ID, InternalFailure on store error
    - delete: NotFound if the ID is absent before deleting, InternalFailure
      if the lookup or the delete errors
    - update: NotFound if the ID no longer exists, InternalFailure if the
      lookup or the write errors; otherwise the persisted entity
    """

    def setup(self) -> None:
        """
        Establish connectivity and create the schema.

        Raises:
            StorageConnectionError: If the store can't be reached or synchronized
        """
        ...

    def get_user(self, user_id: int) -> StorageResult[User]: ...

    def create_user(self, username: str) -> StorageResult[User]: ...

    def delete_user(self, user_id: int) -> StorageResult[None]: ...

    def update_user(self, user: User) -> StorageResult[User]: ...

    def get_study_group(self, group_id: int) -> StorageResult[StudyGroup]: ...

    def create_study_group(self, group_name: str) -> StorageResult[StudyGroup]: ...

    def delete_study_group(self, group_id: int) -> StorageResult[None]: ...

    def update_study_group(self, study_group: StudyGroup) -> StorageResult[StudyGroup]: ...

    def get_deck(self, deck_id: int) -> StorageResult[Deck]: ...

    def create_deck(
        self, deck_name: str, creator_id: int, group_id: int
    ) -> StorageResult[Deck]: ...

    def delete_deck(self, deck_id: int) -> StorageResult[None]: ...

    def update_deck(self, deck: Deck) -> StorageResult[Deck]: ...

    def get_flashcard(self, flashcard_id: int) -> StorageResult[Flashcard]: ...

    def create_flashcard(
        self, question: str, answer: str, creator_id: int, deck_id: int
    ) -> StorageResult[Flashcard]: ...

    def delete_flashcard(self, flashcard_id: int) -> StorageResult[None]: ...

    def update_flashcard(self, flashcard: Flashcard) -> StorageResult[Flashcard]: ...
