from typing import Protocol

from quotebook.domain.common.value_objects.ids import UserId
from quotebook.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...
