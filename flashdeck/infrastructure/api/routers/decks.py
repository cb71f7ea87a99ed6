"""API routes for decks."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from flashdeck.application.handler.api_handler import ApiHandler
from flashdeck.infrastructure.api.di import get_api_handler
from flashdeck.infrastructure.api.responses import to_json_response
from flashdeck.infrastructure.api.schemas import DeckCreateRequest, DeckUpdateRequest
from flashdeck.models import MAX_ID

router = APIRouter(prefix="/decks", tags=["decks"])

Handler = Annotated[ApiHandler, Depends(get_api_handler)]
DeckIdPath = Annotated[int, Path(ge=0, le=MAX_ID, description="ID of the deck")]


@router.get("/{deck_id}")
def get_deck(deck_id: DeckIdPath, handler: Handler) -> JSONResponse:
    return to_json_response(handler.get_deck(deck_id))


@router.post("")
def create_deck(request: DeckCreateRequest, handler: Handler) -> JSONResponse:
    """
    Create a deck inside a study group.

    Creator and group IDs are stored as given; nothing checks that they exist.
    """
    return to_json_response(
        handler.create_deck(request.deck_name, request.creator_id, request.group_id)
    )


@router.delete("/{deck_id}")
def delete_deck(deck_id: DeckIdPath, handler: Handler) -> JSONResponse:
    return to_json_response(handler.delete_deck(deck_id))


@router.patch("/{deck_id}")
def update_deck(
    deck_id: DeckIdPath, handler: Handler, request: DeckUpdateRequest | None = None
) -> JSONResponse:
    """Rename a deck."""
    deck_name = request.deck_name if request else None
    return to_json_response(handler.update_deck(deck_id, deck_name))
