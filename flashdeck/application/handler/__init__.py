"""
Request handling.

Maps storage outcomes to ``ApiResponse`` envelopes:
- CrudHandler: the get/create/delete/update state machine for one entity type
- ApiHandler: the named operations for every entity type
"""

from .api_handler import ApiHandler
from .crud_handler import CrudHandler, EntityDescriptor
from .response import NO_FIELDS_TO_UPDATE_MESSAGE, ApiResponse

__all__ = [
    "NO_FIELDS_TO_UPDATE_MESSAGE",
    "ApiHandler",
    "ApiResponse",
    "CrudHandler",
    "EntityDescriptor",
]
