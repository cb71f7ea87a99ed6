"""API routes for users."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from flashdeck.application.handler.api_handler import ApiHandler
from flashdeck.infrastructure.api.di import get_api_handler
from flashdeck.infrastructure.api.responses import to_json_response
from flashdeck.infrastructure.api.schemas import UserCreateRequest, UserUpdateRequest
from flashdeck.models import MAX_ID

router = APIRouter(prefix="/users", tags=["users"])

Handler = Annotated[ApiHandler, Depends(get_api_handler)]
UserIdPath = Annotated[int, Path(ge=0, le=MAX_ID, description="ID of the user")]


@router.get("/{user_id}")
def get_user(user_id: UserIdPath, handler: Handler) -> JSONResponse:
    """Get a user's info via their ID."""
    return to_json_response(handler.get_user(user_id))


@router.post("")
def create_user(request: UserCreateRequest, handler: Handler) -> JSONResponse:
    """Create a user. Responds 201 with the stored user."""
    return to_json_response(handler.create_user(request.username))


@router.delete("/{user_id}")
def delete_user(user_id: UserIdPath, handler: Handler) -> JSONResponse:
    return to_json_response(handler.delete_user(user_id))


@router.patch("/{user_id}")
def update_user(
    user_id: UserIdPath, handler: Handler, request: UserUpdateRequest | None = None
) -> JSONResponse:
    """
    Change a user's username.

    An empty body is answered with 400 since there is nothing to update.
    """
    username = request.username if request else None
    return to_json_response(handler.update_user(user_id, username))
