"""Mapper for User ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(id=UserId(orm_model.id), username=orm_model.username)

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.username = domain_entity.username
            return orm_model

        return UserORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            username=domain_entity.username,
        )
