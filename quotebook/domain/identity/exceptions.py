"""Identity domain exceptions."""

from quotebook.domain.common.exceptions import EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when the acting user does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)
