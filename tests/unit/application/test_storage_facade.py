"""Tests for StorageFacade delegation."""

from unittest.mock import MagicMock, create_autospec

import pytest

from flashdeck.application.common.result import Failure, Success
from flashdeck.application.storage.facade import StorageFacade
from flashdeck.application.storage.outcomes import InternalFailure, NotFound
from flashdeck.application.storage.protocols import StorageDriver
from flashdeck.domain.common.value_objects import DeckId, StudyGroupId, UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.exceptions import StorageConnectionError


@pytest.fixture
def driver() -> MagicMock:
    return create_autospec(StorageDriver, instance=True)


@pytest.fixture
def facade(driver: MagicMock) -> StorageFacade:
    return StorageFacade(driver)


class TestStorageFacade:
    def test_setup_delegates(self, facade: StorageFacade, driver: MagicMock) -> None:
        facade.setup()

        driver.setup.assert_called_once_with()

    def test_setup_error_propagates(self, facade: StorageFacade, driver: MagicMock) -> None:
        driver.setup.side_effect = StorageConnectionError("Failed to connect to database - x")

        with pytest.raises(StorageConnectionError):
            facade.setup()

    def test_get_returns_driver_outcome(self, facade: StorageFacade, driver: MagicMock) -> None:
        outcome = Success(User.create_with_id(UserId(1), "alice"))
        driver.get_user.return_value = outcome

        assert facade.get_user(1) is outcome
        driver.get_user.assert_called_once_with(1)

    def test_failures_pass_through(self, facade: StorageFacade, driver: MagicMock) -> None:
        not_found = Failure(NotFound("no deck"))
        internal = Failure(InternalFailure("db down"))
        driver.delete_deck.return_value = not_found
        driver.create_study_group.return_value = internal

        assert facade.delete_deck(3) is not_found
        assert facade.create_study_group("Biology") is internal

    def test_create_deck_passes_arguments(
        self, facade: StorageFacade, driver: MagicMock
    ) -> None:
        driver.create_deck.return_value = Success(
            Deck.create_with_id(DeckId(1), "Cells", UserId(2), StudyGroupId(3))
        )

        facade.create_deck("Cells", 2, 3)

        driver.create_deck.assert_called_once_with("Cells", 2, 3)

    def test_update_returns_persisted_entity(
        self, facade: StorageFacade, driver: MagicMock
    ) -> None:
        persisted = User.create_with_id(UserId(1), "bob")
        driver.update_user.return_value = Success(persisted)

        result = facade.update_user(User.create_with_id(UserId(1), "bob"))

        assert result == Success(persisted)

    def test_driver_exception_propagates(
        self, facade: StorageFacade, driver: MagicMock
    ) -> None:
        driver.update_flashcard.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            facade.update_flashcard(MagicMock())
