"""
Base class for Entities.

Entities have a distinct identity that runs through time. The store assigns
that identity on creation and it never changes afterwards; everything else
about an entity may.

Example:
    @dataclass
    class User(Entity[UserId]):
        id: UserId
        username: str

        def change_username(self, username: str) -> None:
            self.username = username
"""

from abc import ABC
from dataclasses import dataclass
from typing import ClassVar, Generic, Self, TypeVar


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed entity identifiers.

    Example:
        user_id = UserId(42)
        deck_id = DeckId(42)
        # Different types, so they can't be mixed up
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. The store assigns the real one on insert."""
        return cls(0)

    def to_primitive(self) -> int:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType and list the
    fields that may change after construction in ``content_fields``. Every
    other field is set once by ``__init__`` and is read-only afterwards.
    """

    id: IdType
    content_fields: ClassVar[frozenset[str]] = frozenset()

    def __setattr__(self, name: str, value: object) -> None:
        if name in self.__dict__ and name not in self.content_fields:
            raise AttributeError(
                f"{self.__class__.__name__}.{name} cannot be changed after creation"
            )
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
