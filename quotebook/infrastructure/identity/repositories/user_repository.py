"""Read access to provisioned users."""

from sqlalchemy.orm import Session

from quotebook.domain.common.value_objects.ids import UserId
from quotebook.domain.identity.entities.user import User
from quotebook.infrastructure.identity.mappers.user_mapper import UserMapper
from quotebook.models import User as UserORM


class UserRepository:
    """Looks up the acting user; accounts are created elsewhere."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        orm_model = self.db.get(UserORM, user_id.value)
        return None if orm_model is None else self.mapper.to_domain(orm_model)
