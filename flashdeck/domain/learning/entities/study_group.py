"""
Study group entity.
"""

from dataclasses import dataclass
from typing import ClassVar, TypedDict

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.value_objects import StudyGroupId


class StudyGroupInfo(TypedDict):
    """Serialized snapshot of a study group."""

    id: int
    groupName: str  # noqa: N815


@dataclass
class StudyGroup(Entity[StudyGroupId]):
    """
    Study group that decks belong to.

    Business Rules:
    - Only the group name can be changed after creation
    - Deleting a group leaves its decks in place
    """

    id: StudyGroupId
    group_name: str

    content_fields: ClassVar[frozenset[str]] = frozenset({"group_name"})

    def rename(self, group_name: str) -> None:
        """Replace the group name."""
        self.group_name = group_name

    def serialize(self) -> StudyGroupInfo:
        return StudyGroupInfo(id=self.id.value, groupName=self.group_name)

    @classmethod
    def create(cls, group_name: str) -> "StudyGroup":
        """Create a new study group (ID will be 0 until persisted)."""
        return cls(id=StudyGroupId.generate(), group_name=group_name)

    @classmethod
    def create_with_id(cls, id: StudyGroupId, group_name: str) -> "StudyGroup":
        """Reconstitute a study group from persistence."""
        return cls(id=id, group_name=group_name)
