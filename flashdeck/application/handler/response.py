"""Response envelope returned by every request handler operation."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

NO_FIELDS_TO_UPDATE_MESSAGE = (
    "No fields have been requested to be updated. Please specify fields to update"
)


@dataclass(frozen=True)
class ApiResponse:
    """
    Body and status code of a handled request.

    The body is either a plain message or the serialized entity.
    """

    body: str | Mapping[str, Any]
    status: int
