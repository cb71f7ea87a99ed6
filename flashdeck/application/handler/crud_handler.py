"""
Outcome classification shared by every entity type.

A ``CrudHandler`` wraps the storage facade operations of one entity type and
turns their tagged outcomes into ``ApiResponse`` envelopes:

    get     Success -> 200, NotFound -> 404, InternalFailure -> 500
    create  Success -> 201, InternalFailure -> 500
    delete  Success -> 200, NotFound -> 404, InternalFailure -> 500
    update  no value -> 400 without touching storage, then fetch
            (NotFound -> 404, InternalFailure -> 500), then update
            (Success -> 200, NotFound -> 409, InternalFailure -> 500)

Anything else coming out of storage raises ``UnknownOperationError``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

import structlog
from starlette import status

from flashdeck.application.common.result import Failure, Success
from flashdeck.application.handler.response import NO_FIELDS_TO_UPDATE_MESSAGE, ApiResponse
from flashdeck.application.storage.outcomes import InternalFailure, NotFound, StorageResult
from flashdeck.exceptions import UnknownOperationError

logger = structlog.get_logger(__name__)


class SerializableEntity(Protocol):
    def serialize(self) -> Any: ...  # noqa: ANN401


E = TypeVar("E", bound=SerializableEntity)
R = TypeVar("R")


@dataclass(frozen=True)
class EntityDescriptor(Generic[E]):
    """
    Everything the handler needs to know about one entity type.

    Attributes:
        name: Display name used in response messages, e.g. "Study group"
        get: Facade operation fetching an entity by ID
        create: Facade operation creating an entity from its fields
        delete: Facade operation deleting an entity by ID
        update: Facade operation persisting a modified entity
        apply_update: Writes a new value into the entity's content field
    """

    name: str
    get: Callable[[int], StorageResult[E]]
    create: Callable[..., StorageResult[E]]
    delete: Callable[[int], StorageResult[None]]
    update: Callable[[E], StorageResult[E]]
    apply_update: Callable[[E, str], None]

    @property
    def noun(self) -> str:
        return self.name.lower()


class CrudHandler(Generic[E]):
    """Get/create/delete/update request handling for one entity type."""

    def __init__(self, descriptor: EntityDescriptor[E]) -> None:
        self.descriptor = descriptor

    def get(self, entity_id: int) -> ApiResponse:
        """
        Fetch an entity.

        Raises:
            UnknownOperationError: If storage fails in an unrecognized way
        """
        action = f"getting {self.descriptor.noun} from database"
        result = self._call(action, self.descriptor.get, entity_id)

        if isinstance(result, Success):
            return ApiResponse(result.value.serialize(), status.HTTP_200_OK)
        return self._failure_response(action, result, on_not_found=_plain_not_found)

    def create(self, *fields: object) -> ApiResponse:
        """
        Create an entity from its fields, in the order the facade expects them.

        Raises:
            UnknownOperationError: If storage fails in an unrecognized way
        """
        action = f"creating {self.descriptor.noun}"
        result = self._call(action, self.descriptor.create, *fields)

        if isinstance(result, Success):
            body = result.value.serialize()
            logger.info("created_entity", entity=self.descriptor.noun, entity_id=body["id"])
            return ApiResponse(body, status.HTTP_201_CREATED)
        return self._failure_response(action, result, on_not_found=None)

    def delete(self, entity_id: int) -> ApiResponse:
        """
        Delete an entity.

        Raises:
            UnknownOperationError: If storage fails in an unrecognized way
        """
        action = f"deleting {self.descriptor.noun}"
        result = self._call(action, self.descriptor.delete, entity_id)

        if isinstance(result, Success):
            logger.info("deleted_entity", entity=self.descriptor.noun, entity_id=entity_id)
            return ApiResponse(
                f"{self.descriptor.name} with ID {entity_id} successfully deleted",
                status.HTTP_200_OK,
            )
        return self._failure_response(action, result, on_not_found=_plain_not_found)

    def update(self, entity_id: int, new_value: str | None = None) -> ApiResponse:
        """
        Replace the content field of an entity.

        The entity is fetched first and the modified copy is handed back to
        storage, so two storage calls are made when a value is given and none
        when it isn't.

        Args:
            entity_id: ID of the entity to update
            new_value: New value of the content field, None if not requested

        Raises:
            UnknownOperationError: If storage fails in an unrecognized way
        """
        if new_value is None:
            return ApiResponse(NO_FIELDS_TO_UPDATE_MESSAGE, status.HTTP_400_BAD_REQUEST)

        action = f"updating {self.descriptor.noun}"
        fetched = self._call(action, self.descriptor.get, entity_id)
        if not isinstance(fetched, Success):
            return self._failure_response(action, fetched, on_not_found=_plain_not_found)

        entity = fetched.value
        self.descriptor.apply_update(entity, new_value)

        result = self._call(action, self.descriptor.update, entity)
        if isinstance(result, Success):
            logger.info("updated_entity", entity=self.descriptor.noun, entity_id=entity_id)
            return ApiResponse(result.value.serialize(), status.HTTP_200_OK)
        return self._failure_response(action, result, on_not_found=self._deleted_mid_update)

    def _call(
        self, action: str, operation: Callable[..., StorageResult[R]], *args: object
    ) -> StorageResult[R]:
        try:
            return operation(*args)
        except Exception as e:
            logger.error("unhandled_storage_error", action=action, exc_info=True)
            raise UnknownOperationError(
                f"Unhandled error raised when {action} - {e}", cause=e
            ) from e

    def _failure_response(
        self,
        action: str,
        result: object,
        *,
        on_not_found: Callable[[str], ApiResponse] | None,
    ) -> ApiResponse:
        match result:
            case Failure(error=NotFound(message=message)) if on_not_found is not None:
                logger.warning("entity_not_found", action=action, detail=message)
                return on_not_found(message)
            case Failure(error=InternalFailure(message=message)):
                logger.error("storage_internal_failure", action=action, detail=message)
                return ApiResponse(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

        cause = result.error if isinstance(result, Failure) else result
        logger.error("unhandled_storage_outcome", action=action, outcome=repr(cause))
        raise UnknownOperationError(
            f"Unhandled error raised when {action} - {cause}", cause=cause
        )

    def _deleted_mid_update(self, message: str) -> ApiResponse:
        return ApiResponse(
            f"{self.descriptor.name} deleted before update could be completed - {message}",
            status.HTTP_409_CONFLICT,
        )


def _plain_not_found(message: str) -> ApiResponse:
    return ApiResponse(message, status.HTTP_404_NOT_FOUND)
