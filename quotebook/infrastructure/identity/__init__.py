"""Identity infrastructure layer."""

from quotebook.infrastructure.identity.dependencies import CurrentUserId, get_current_user_id
from quotebook.infrastructure.identity.repositories.user_repository import UserRepository

__all__ = [
    "CurrentUserId",
    "UserRepository",
    "get_current_user_id",
]
