"""Behaviour every storage driver shares, run against each implementation."""

import pytest
from sqlalchemy.engine import Engine

from flashdeck.application.common.result import Failure, Success
from flashdeck.application.storage.outcomes import NotFound
from flashdeck.application.storage.protocols import StorageDriver
from flashdeck.domain.common.value_objects import DeckId, StudyGroupId, UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.study_group import StudyGroup
from flashdeck.infrastructure.storage.in_memory_driver import InMemoryStorageDriver
from flashdeck.infrastructure.storage.sqlalchemy_driver import SqlAlchemyStorageDriver
from flashdeck.models import MAX_ID


@pytest.fixture(params=["sqlalchemy", "in_memory"])
def driver(request: pytest.FixtureRequest, engine: Engine) -> StorageDriver:
    if request.param == "in_memory":
        return InMemoryStorageDriver()
    sql_driver = SqlAlchemyStorageDriver(engine)
    sql_driver.setup()
    return sql_driver


class TestUsers:
    def test_create_then_get(self, driver: StorageDriver) -> None:
        created = driver.create_user("alice")

        assert isinstance(created, Success)
        user = created.value
        assert user.id.value > 0
        assert driver.get_user(user.id.value) == Success(user)

    def test_ids_are_distinct(self, driver: StorageDriver) -> None:
        first = driver.create_user("alice").unwrap()
        second = driver.create_user("bob").unwrap()

        assert first.id != second.id

    def test_get_missing(self, driver: StorageDriver) -> None:
        assert driver.get_user(99) == Failure(NotFound("Could not find user with ID 99"))

    def test_delete(self, driver: StorageDriver) -> None:
        user = driver.create_user("alice").unwrap()

        assert driver.delete_user(user.id.value) == Success(None)
        assert isinstance(driver.get_user(user.id.value), Failure)

    def test_delete_missing(self, driver: StorageDriver) -> None:
        assert driver.delete_user(5) == Failure(NotFound("Could not find user with ID 5"))

    def test_update(self, driver: StorageDriver) -> None:
        user = driver.create_user("alice").unwrap()
        user.change_username("bob")

        result = driver.update_user(user)

        assert result == Success(User.create_with_id(user.id, "bob"))
        assert driver.get_user(user.id.value).unwrap().username == "bob"

    def test_update_missing(self, driver: StorageDriver) -> None:
        ghost = User.create_with_id(UserId(42), "ghost")

        assert driver.update_user(ghost) == Failure(NotFound("Could not find user with ID 42"))


class TestStudyGroups:
    def test_round_trip(self, driver: StorageDriver) -> None:
        group = driver.create_study_group("Biology").unwrap()

        fetched = driver.get_study_group(group.id.value).unwrap()

        assert fetched.serialize() == {"id": group.id.value, "groupName": "Biology"}

    def test_messages_use_spaced_noun(self, driver: StorageDriver) -> None:
        assert driver.get_study_group(7) == Failure(
            NotFound("Could not find study group with ID 7")
        )


class TestDecks:
    def test_round_trip(self, driver: StorageDriver) -> None:
        deck = driver.create_deck("Cells", 3, 4).unwrap()

        fetched = driver.get_deck(deck.id.value).unwrap()

        assert fetched.deck_name == "Cells"
        assert fetched.creator_id == UserId(3)
        assert fetched.group_id == StudyGroupId(4)

    def test_update_only_writes_name(self, driver: StorageDriver) -> None:
        deck = driver.create_deck("Cells", 3, 4).unwrap()
        submitted = Deck.create_with_id(deck.id, "Organelles", UserId(99), StudyGroupId(99))

        updated = driver.update_deck(submitted).unwrap()

        assert updated.deck_name == "Organelles"
        assert updated.creator_id == UserId(3)
        assert updated.group_id == StudyGroupId(4)

    def test_delete_missing(self, driver: StorageDriver) -> None:
        assert driver.delete_deck(8) == Failure(NotFound("Could not find deck with ID 8"))


class TestFlashcards:
    def test_round_trip(self, driver: StorageDriver) -> None:
        card = driver.create_flashcard("What is ATP?", "Energy currency", 1, 2).unwrap()

        fetched = driver.get_flashcard(card.id.value).unwrap()

        assert fetched == card
        assert fetched.deck_id == DeckId(2)

    def test_update_only_writes_answer(self, driver: StorageDriver) -> None:
        card = driver.create_flashcard("What is ATP?", "Sugar", 1, 2).unwrap()
        submitted = Flashcard.create_with_id(
            card.id, "Changed question", "Energy currency", UserId(9), DeckId(9)
        )

        updated = driver.update_flashcard(submitted).unwrap()

        assert updated.answer == "Energy currency"
        assert updated.question == "What is ATP?"
        assert updated.creator_id == UserId(1)
        assert updated.deck_id == DeckId(2)

    def test_update_missing(self, driver: StorageDriver) -> None:
        card = driver.create_flashcard("Q", "A", 1, 2).unwrap()
        driver.delete_flashcard(card.id.value)

        result = driver.update_flashcard(card)

        assert result == Failure(NotFound(f"Could not find flashcard with ID {card.id.value}"))


class TestIdsBeyondColumnRange:
    """IDs no row can hold are reported as missing, never as a store error."""

    def test_get(self, driver: StorageDriver) -> None:
        too_large = MAX_ID + 1

        assert driver.get_user(too_large) == Failure(
            NotFound(f"Could not find user with ID {too_large}")
        )

    def test_huge_id(self, driver: StorageDriver) -> None:
        assert isinstance(driver.get_flashcard(2**70).unwrap_error(), NotFound)

    def test_delete(self, driver: StorageDriver) -> None:
        assert driver.delete_deck(MAX_ID + 1) == Failure(
            NotFound(f"Could not find deck with ID {MAX_ID + 1}")
        )

    def test_update(self, driver: StorageDriver) -> None:
        group = StudyGroup.create_with_id(StudyGroupId(2**40), "Biology")

        assert driver.update_study_group(group) == Failure(
            NotFound(f"Could not find study group with ID {2**40}")
        )

    def test_largest_id_reaches_the_store(self, driver: StorageDriver) -> None:
        assert driver.get_user(MAX_ID) == Failure(
            NotFound(f"Could not find user with ID {MAX_ID}")
        )
