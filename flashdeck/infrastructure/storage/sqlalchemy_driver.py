"""Storage driver backed by a relational database through SQLAlchemy."""

from typing import Any, Generic, Protocol, TypeVar

import structlog
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from flashdeck.application.common.result import Success
from flashdeck.application.storage.outcomes import StorageResult, internal_failure, not_found
from flashdeck.database import Base, create_session_factory
from flashdeck.domain.common.value_objects import DeckId, StudyGroupId, UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.study_group import StudyGroup
from flashdeck.exceptions import StorageConnectionError
from flashdeck.infrastructure.storage.mappers import (
    DeckMapper,
    FlashcardMapper,
    StudyGroupMapper,
    UserMapper,
)
from flashdeck.models import Deck as DeckORM
from flashdeck.models import Flashcard as FlashcardORM
from flashdeck.models import StudyGroup as StudyGroupORM
from flashdeck.models import User as UserORM
from flashdeck.models import MAX_ID

logger = structlog.get_logger(__name__)

D = TypeVar("D", User, StudyGroup, Deck, Flashcard)
M = TypeVar("M", bound=Base)


class _Mapper(Protocol[D, M]):
    def to_domain(self, orm_model: M) -> D: ...

    def to_orm(self, domain_entity: D, orm_model: M | None = None) -> M: ...


class _Table(Generic[D, M]):
    """Get/create/delete/update against one ORM model, one session per call."""

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        orm_class: type[M],
        mapper: _Mapper[D, M],
        noun: str,
    ) -> None:
        self.session_factory = session_factory
        self.orm_class = orm_class
        self.mapper = mapper
        self.noun = noun

    def _missing(self, entity_id: int) -> StorageResult[Any]:
        return not_found(f"Could not find {self.noun} with ID {entity_id}")

    def get(self, entity_id: int) -> StorageResult[D]:
        # No row can hold an id beyond the column range
        if entity_id > MAX_ID:
            return self._missing(entity_id)
        try:
            with self.session_factory() as session:
                orm_model = session.get(self.orm_class, entity_id)
                if orm_model is None:
                    return self._missing(entity_id)
                return Success(self.mapper.to_domain(orm_model))
        except SQLAlchemyError as e:
            return internal_failure(f"Failed to get {self.noun} with ID {entity_id} - {e}")

    def create(self, entity: D) -> StorageResult[D]:
        try:
            with self.session_factory() as session:
                orm_model = self.mapper.to_orm(entity)
                session.add(orm_model)
                session.commit()
                session.refresh(orm_model)
                return Success(self.mapper.to_domain(orm_model))
        except SQLAlchemyError as e:
            return internal_failure(f"Failed to create {self.noun} - {e}")

    def delete(self, entity_id: int) -> StorageResult[None]:
        if entity_id > MAX_ID:
            return self._missing(entity_id)
        try:
            with self.session_factory() as session:
                orm_model = session.get(self.orm_class, entity_id)
                if orm_model is None:
                    return self._missing(entity_id)
                session.delete(orm_model)
                session.commit()
        except SQLAlchemyError as e:
            return internal_failure(f"Failed to delete {self.noun} with ID {entity_id} - {e}")
        return Success(None)

    def update(self, entity: D) -> StorageResult[D]:
        entity_id = entity.id.value
        if entity_id > MAX_ID:
            return self._missing(entity_id)
        with self.session_factory() as session:
            try:
                orm_model = session.get(self.orm_class, entity_id)
            except SQLAlchemyError as e:
                return internal_failure(f"Failed to get {self.noun} with ID {entity_id} - {e}")
            if orm_model is None:
                return self._missing(entity_id)

            try:
                self.mapper.to_orm(entity, orm_model)
                session.commit()
                session.refresh(orm_model)
            except SQLAlchemyError as e:
                session.rollback()
                return internal_failure(
                    f"Failed to update {self.noun} with ID {entity_id} - {e}"
                )
            return Success(self.mapper.to_domain(orm_model))


class SqlAlchemyStorageDriver:
    """
    Storage driver for any database SQLAlchemy can talk to.

    Store errors (``SQLAlchemyError``) settle as ``InternalFailure``; any
    other exception propagates to the caller. Updates only write the entity's
    content column and return the row as re-read from the database.
    """

    def __init__(self, engine: Engine, reset_schema: bool = False) -> None:
        """
        Initialize driver.

        Args:
            engine: Engine to open sessions on
            reset_schema: Drop existing tables during setup (throwaway test databases)
        """
        self.engine = engine
        self.reset_schema = reset_schema
        session_factory = create_session_factory(engine)
        self.users = _Table(session_factory, UserORM, UserMapper(), "user")
        self.study_groups = _Table(
            session_factory, StudyGroupORM, StudyGroupMapper(), "study group"
        )
        self.decks = _Table(session_factory, DeckORM, DeckMapper(), "deck")
        self.flashcards = _Table(session_factory, FlashcardORM, FlashcardMapper(), "flashcard")

    def setup(self) -> None:
        """
        Confirm the database is reachable and create the tables.

        Raises:
            StorageConnectionError: If connecting or synchronizing the models fails
        """
        try:
            with self.engine.connect():
                pass
        except SQLAlchemyError as e:
            raise StorageConnectionError(f"Failed to connect to database - {e}") from e

        try:
            if self.reset_schema:
                logger.warning("dropping_tables", url=self.engine.url.render_as_string())
                Base.metadata.drop_all(self.engine)
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StorageConnectionError(f"Model synchronization failed: {e}") from e

    def get_user(self, user_id: int) -> StorageResult[User]:
        return self.users.get(user_id)

    def create_user(self, username: str) -> StorageResult[User]:
        return self.users.create(User.create(username))

    def delete_user(self, user_id: int) -> StorageResult[None]:
        return self.users.delete(user_id)

    def update_user(self, user: User) -> StorageResult[User]:
        return self.users.update(user)

    def get_study_group(self, group_id: int) -> StorageResult[StudyGroup]:
        return self.study_groups.get(group_id)

    def create_study_group(self, group_name: str) -> StorageResult[StudyGroup]:
        return self.study_groups.create(StudyGroup.create(group_name))

    def delete_study_group(self, group_id: int) -> StorageResult[None]:
        return self.study_groups.delete(group_id)

    def update_study_group(self, study_group: StudyGroup) -> StorageResult[StudyGroup]:
        return self.study_groups.update(study_group)

    def get_deck(self, deck_id: int) -> StorageResult[Deck]:
        return self.decks.get(deck_id)

    def create_deck(self, deck_name: str, creator_id: int, group_id: int) -> StorageResult[Deck]:
        return self.decks.create(
            Deck.create(deck_name, UserId(creator_id), StudyGroupId(group_id))
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
            Flashcard.create(question, answer, UserId(creator_id), DeckId(deck_id))
        )

    def delete_flashcard(self, flashcard_id: int) -> StorageResult[None]:
        return self.flashcards.delete(flashcard_id)

    def update_flashcard(self, flashcard: Flashcard) -> StorageResult[Flashcard]:
        return self.flashcards.update(flashcard)
