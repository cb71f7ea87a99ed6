"""Request handler exposing every entity operation to the transport layer."""

from flashdeck.application.handler.crud_handler import CrudHandler, EntityDescriptor
from flashdeck.application.handler.response import ApiResponse
from flashdeck.application.storage.facade import StorageFacade
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.study_group import StudyGroup


class ApiHandler:
    """
    Handles API logic for users, study groups, decks and flashcards.

    Every operation returns an ``ApiResponse``. Failures storage reports as
    ``NotFound`` or ``InternalFailure`` become regular responses; any other
    failure raises ``UnknownOperationError``.
    """

    def __init__(self, facade: StorageFacade) -> None:
        """Initialize handler with the storage facade to access the database with."""
        self.facade = facade
        self.users = CrudHandler(
            EntityDescriptor(
                name="User",
                get=facade.get_user,
                create=facade.create_user,
                delete=facade.delete_user,
                update=facade.update_user,
                apply_update=User.change_username,
            )
        )
        self.study_groups = CrudHandler(
            EntityDescriptor(
                name="Study group",
                get=facade.get_study_group,
                create=facade.create_study_group,
                delete=facade.delete_study_group,
                update=facade.update_study_group,
                apply_update=StudyGroup.rename,
            )
        )
        self.decks = CrudHandler(
            EntityDescriptor(
                name="Deck",
                get=facade.get_deck,
                create=facade.create_deck,
                delete=facade.delete_deck,
                update=facade.update_deck,
                apply_update=Deck.rename,
            )
        )
        self.flashcards = CrudHandler(
            EntityDescriptor(
                name="Flashcard",
                get=facade.get_flashcard,
                create=facade.create_flashcard,
                delete=facade.delete_flashcard,
                update=facade.update_flashcard,
                apply_update=Flashcard.update_answer,
            )
        )

    def get_user(self, user_id: int) -> ApiResponse:
        return self.users.get(user_id)

    def create_user(self, username: str) -> ApiResponse:
        return self.users.create(username)

    def delete_user(self, user_id: int) -> ApiResponse:
        return self.users.delete(user_id)

    def update_user(self, user_id: int, username: str | None = None) -> ApiResponse:
        """Change a user's username."""
        return self.users.update(user_id, username)

    def get_study_group(self, group_id: int) -> ApiResponse:
        return self.study_groups.get(group_id)

    def create_study_group(self, group_name: str) -> ApiResponse:
        return self.study_groups.create(group_name)

    def delete_study_group(self, group_id: int) -> ApiResponse:
        return self.study_groups.delete(group_id)

    def update_study_group(self, group_id: int, group_name: str | None = None) -> ApiResponse:
        """Rename a study group."""
        return self.study_groups.update(group_id, group_name)

    def get_deck(self, deck_id: int) -> ApiResponse:
        return self.decks.get(deck_id)

    def create_deck(self, deck_name: str, creator_id: int, group_id: int) -> ApiResponse:
        return self.decks.create(deck_name, creator_id, group_id)

    def delete_deck(self, deck_id: int) -> ApiResponse:
        return self.decks.delete(deck_id)

    def update_deck(self, deck_id: int, deck_name: str | None = None) -> ApiResponse:
        """Rename a deck."""
        return self.decks.update(deck_id, deck_name)

    def get_flashcard(self, flashcard_id: int) -> ApiResponse:
        return self.flashcards.get(flashcard_id)

    def create_flashcard(
        self, question: str, answer: str, creator_id: int, deck_id: int
    ) -> ApiResponse:
        return self.flashcards.create(question, answer, creator_id, deck_id)

    def delete_flashcard(self, flashcard_id: int) -> ApiResponse:
        return self.flashcards.delete(flashcard_id)

    def update_flashcard(self, flashcard_id: int, answer: str | None = None) -> ApiResponse:
        """Replace a flashcard's answer. Its question never changes."""
        return self.flashcards.update(flashcard_id, answer)
