"""Mapper for User ORM to domain conversion."""

from quotebook.domain.common.value_objects.ids import UserId
from quotebook.domain.identity.entities.user import User
from quotebook.models import User as UserORM
from quotebook.utils import ensure_utc


class UserMapper:
    """Users are read-only here, so there is no to_orm."""

    def to_domain(self, orm_model: UserORM) -> User:
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
        )
