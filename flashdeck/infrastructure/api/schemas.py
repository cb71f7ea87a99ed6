"""Pydantic schemas for API request validation."""

from pydantic import BaseModel, ConfigDict, Field

from flashdeck.models import CARD_TEXT_MAX_LENGTH, MAX_ID, NAME_MAX_LENGTH


class CamelModel(BaseModel):
    """Accepts camelCase keys on the wire and snake_case names in Python."""

    model_config = ConfigDict(populate_by_name=True)


class UserCreateRequest(CamelModel):
    """Schema for creating a user."""

    username: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)


class UserUpdateRequest(CamelModel):
    """Schema for updating a user."""

    username: str | None = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)


class StudyGroupCreateRequest(CamelModel):
    """Schema for creating a study group."""

    group_name: str = Field(..., alias="groupName", min_length=1, max_length=NAME_MAX_LENGTH)


class StudyGroupUpdateRequest(CamelModel):
    """Schema for renaming a study group."""

    group_name: str | None = Field(
        None, alias="groupName", min_length=1, max_length=NAME_MAX_LENGTH
    )


class DeckCreateRequest(CamelModel):
    """Schema for creating a deck."""

    deck_name: str = Field(..., alias="deckName", min_length=1, max_length=NAME_MAX_LENGTH)
    creator_id: int = Field(
        ..., alias="creatorId", ge=0, le=MAX_ID, description="ID of the creating user"
    )
    group_id: int = Field(
        ..., alias="groupId", ge=0, le=MAX_ID, description="ID of the owning study group"
    )


class DeckUpdateRequest(CamelModel):
    """Schema for renaming a deck."""

    deck_name: str | None = Field(
        None, alias="deckName", min_length=1, max_length=NAME_MAX_LENGTH
    )


class FlashcardCreateRequest(CamelModel):
    """Schema for creating a flashcard."""

    question: str = Field(..., min_length=1, max_length=CARD_TEXT_MAX_LENGTH)
    answer: str = Field(..., min_length=1, max_length=CARD_TEXT_MAX_LENGTH)
    creator_id: int = Field(
        ..., alias="creatorId", ge=0, le=MAX_ID, description="ID of the creating user"
    )
    deck_id: int = Field(
        ..., alias="deckId", ge=0, le=MAX_ID, description="ID of the owning deck"
    )


class FlashcardUpdateRequest(CamelModel):
    """Schema for updating a flashcard. Only the answer can change."""

    answer: str | None = Field(
        None, min_length=1, max_length=CARD_TEXT_MAX_LENGTH, description="New answer text"
    )
