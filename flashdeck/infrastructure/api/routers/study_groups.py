"""API routes for study groups."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from flashdeck.application.handler.api_handler import ApiHandler
from flashdeck.infrastructure.api.di import get_api_handler
from flashdeck.infrastructure.api.responses import to_json_response
from flashdeck.infrastructure.api.schemas import (
    StudyGroupCreateRequest,
    StudyGroupUpdateRequest,
)
from flashdeck.models import MAX_ID

router = APIRouter(prefix="/study-groups", tags=["study-groups"])

Handler = Annotated[ApiHandler, Depends(get_api_handler)]
GroupIdPath = Annotated[int, Path(ge=0, le=MAX_ID, description="ID of the study group")]


@router.get("/{group_id}")
def get_study_group(group_id: GroupIdPath, handler: Handler) -> JSONResponse:
    """Get a study group's info via its ID."""
    return to_json_response(handler.get_study_group(group_id))


@router.post("")
def create_study_group(request: StudyGroupCreateRequest, handler: Handler) -> JSONResponse:
    return to_json_response(handler.create_study_group(request.group_name))


@router.delete("/{group_id}")
def delete_study_group(group_id: GroupIdPath, handler: Handler) -> JSONResponse:
    """Delete a study group. Its decks are left untouched."""
    return to_json_response(handler.delete_study_group(group_id))


@router.patch("/{group_id}")
def update_study_group(
    group_id: GroupIdPath, handler: Handler, request: StudyGroupUpdateRequest | None = None
) -> JSONResponse:
    """Rename a study group."""
    group_name = request.group_name if request else None
    return to_json_response(handler.update_study_group(group_id, group_name))
