"""API routes for flashcard management."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from flashdeck.application.handler.api_handler import ApiHandler
from flashdeck.infrastructure.api.di import get_api_handler
from flashdeck.infrastructure.api.responses import to_json_response
from flashdeck.infrastructure.api.schemas import FlashcardCreateRequest, FlashcardUpdateRequest
from flashdeck.models import MAX_ID

router = APIRouter(prefix="/flashcards", tags=["flashcards"])

Handler = Annotated[ApiHandler, Depends(get_api_handler)]
FlashcardIdPath = Annotated[int, Path(ge=0, le=MAX_ID, description="ID of the flashcard")]


@router.get("/{flashcard_id}")
def get_flashcard(flashcard_id: FlashcardIdPath, handler: Handler) -> JSONResponse:
    """Get a flashcard via its ID."""
    return to_json_response(handler.get_flashcard(flashcard_id))


@router.post("")
def create_flashcard(request: FlashcardCreateRequest, handler: Handler) -> JSONResponse:
    """
    Create a flashcard in a deck.

    Args:
        request: Question, answer, creator and deck of the new flashcard
        handler: ApiHandler injected via dependency container

    Returns:
        201 with the stored flashcard, or 500 if the store failed
    """
    return to_json_response(
        handler.create_flashcard(
            request.question, request.answer, request.creator_id, request.deck_id
        )
    )


@router.delete("/{flashcard_id}")
def delete_flashcard(flashcard_id: FlashcardIdPath, handler: Handler) -> JSONResponse:
    return to_json_response(handler.delete_flashcard(flashcard_id))


@router.patch("/{flashcard_id}")
def update_flashcard(
    flashcard_id: FlashcardIdPath,
    handler: Handler,
    request: FlashcardUpdateRequest | None = None,
) -> JSONResponse:
    """
    Update a flashcard's answer.

    Args:
        flashcard_id: ID of the flashcard to update
        handler: ApiHandler injected via dependency container
        request: Request containing the new answer

    Returns:
        200 with the updated flashcard, 400 if no answer was sent, 404 if the
        flashcard doesn't exist, 409 if it was deleted while updating
    """
    answer = request.answer if request else None
    return to_json_response(handler.update_flashcard(flashcard_id, answer))
