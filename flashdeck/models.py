"""Database models."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from flashdeck.database import Base

NAME_MAX_LENGTH = 128
CARD_TEXT_MAX_LENGTH = 512
# Largest value the Integer id columns hold on every supported backend
MAX_ID = 2**31 - 1


class User(Base):
    """User model."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"


class StudyGroup(Base):
    """Study group model."""

    __tablename__ = "study_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    group_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<StudyGroup(id={self.id}, group_name='{self.group_name}')>"


class Deck(Base):
    """Deck model. Creator and group are plain integer columns without foreign keys."""

    __tablename__ = "decks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    deck_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    creator_id: Mapped[int] = mapped_column(Integer, nullable=False)
    group_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Deck(id={self.id}, deck_name='{self.deck_name}')>"


class Flashcard(Base):
    """Flashcard model. Creator and deck are plain integer columns without foreign keys."""

    __tablename__ = "flashcards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question: Mapped[str] = mapped_column(String(CARD_TEXT_MAX_LENGTH), nullable=False)
    answer: Mapped[str] = mapped_column(String(CARD_TEXT_MAX_LENGTH), nullable=False)
    creator_id: Mapped[int] = mapped_column(Integer, nullable=False)
    deck_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Flashcard(id={self.id}, question='{self.question[:50]}...')>"
