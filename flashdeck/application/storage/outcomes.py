"""
Tagged outcomes produced by storage drivers.

Every driver operation settles as ``Success(value)`` or as a ``Failure``
carrying exactly one of the kinds below. Anything else that escapes a
driver is a defect, not an outcome.
"""

from dataclasses import dataclass
from typing import TypeVar

from flashdeck.application.common.result import Failure, Success

T = TypeVar("T")


@dataclass(frozen=True)
class NotFound:
    """The entity targeted by the operation does not exist."""

    message: str


@dataclass(frozen=True)
class InternalFailure:
    """The store failed for a reason unrelated to the caller's input."""

    message: str


StorageFailure = NotFound | InternalFailure

StorageResult = Success[T] | Failure[StorageFailure]


def not_found(message: str) -> Failure[StorageFailure]:
    return Failure(NotFound(message))


def internal_failure(message: str) -> Failure[StorageFailure]:
    return Failure(InternalFailure(message))


def outcome_kind(result: object) -> str:
    """Short label of a storage result, for logging."""
    match result:
        case Success():
            return "success"
        case Failure(error=NotFound()):
            return "not_found"
        case Failure(error=InternalFailure()):
            return "internal_failure"
        case _:
            return "unknown"
