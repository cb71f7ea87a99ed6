"""
Storage boundary of the application layer.

- protocols: the driver contract every storage technology implements
- outcomes: the closed set of tagged results drivers settle with
- facade: the pass-through the request handler depends on
"""

from .facade import StorageFacade
from .outcomes import (
    InternalFailure,
    NotFound,
    StorageFailure,
    StorageResult,
    internal_failure,
    not_found,
)
from .protocols import StorageDriver

__all__ = [
    "InternalFailure",
    "NotFound",
    "StorageDriver",
    "StorageFacade",
    "StorageFailure",
    "StorageResult",
    "internal_failure",
    "not_found",
]
