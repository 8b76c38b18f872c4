"""Identity domain layer."""

from quotebook.domain.identity.entities.user import User
from quotebook.domain.identity.exceptions import UserNotFoundError

__all__ = [
    "User",
    "UserNotFoundError",
]
