"""Mapper for StudyGroup ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import StudyGroupId
from flashdeck.domain.learning.entities.study_group import StudyGroup
from flashdeck.models import StudyGroup as StudyGroupORM


class StudyGroupMapper:
    """Mapper for StudyGroup ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: StudyGroupORM) -> StudyGroup:
        """Convert ORM model to domain entity."""
        return StudyGroup.create_with_id(
            id=StudyGroupId(orm_model.id), group_name=orm_model.group_name
        )

    def to_orm(
        self, domain_entity: StudyGroup, orm_model: StudyGroupORM | None = None
    ) -> StudyGroupORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.group_name = domain_entity.group_name
            return orm_model

        return StudyGroupORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            group_name=domain_entity.group_name,
        )
