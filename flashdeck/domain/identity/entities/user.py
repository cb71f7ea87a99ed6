"""User entity for identity management."""

from dataclasses import dataclass
from typing import ClassVar, TypedDict

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.value_objects.ids import UserId


class UserInfo(TypedDict):
    """Serialized snapshot of a user."""

    id: int
    username: str


@dataclass
class User(Entity[UserId]):
    """
    User entity representing a member of the application.

    Business Rules:
    - The ID is assigned by the store and never changes
    - Only the username can be changed after creation
    """

    id: UserId
    username: str

    content_fields: ClassVar[frozenset[str]] = frozenset({"username"})

    def change_username(self, username: str) -> None:
        """
        Replace the user's username.

        Args:
            username: The new username
        """
        self.username = username

    def serialize(self) -> UserInfo:
        """Snapshot every field of this user as plain data."""
        return UserInfo(id=self.id.value, username=self.username)

    @classmethod
    def create(cls, username: str) -> "User":
        """Create a new user (ID will be 0 until persisted)."""
        return cls(id=UserId.generate(), username=username)

    @classmethod
    def create_with_id(cls, id: UserId, username: str) -> "User":
        """Reconstitute a user from persistence."""
        return cls(id=id, username=username)
