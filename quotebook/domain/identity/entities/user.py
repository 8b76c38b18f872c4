"""Reader account as seen by the library."""

from dataclasses import dataclass
from datetime import datetime

from quotebook.domain.common.entity import Entity
from quotebook.domain.common.exceptions import ValidationError
from quotebook.domain.common.value_objects.ids import UserId

EMAIL_MAX_LENGTH = 100


@dataclass
class User(Entity[UserId]):
    """
    Owner of library entries.

    Accounts are provisioned elsewhere; this service only checks that the
    acting user exists before adding books for them.
    """

    id: UserId
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        email = self.email.strip()
        if not email or len(email) > EMAIL_MAX_LENGTH:
            raise ValidationError(
                f"Email must be 1 to {EMAIL_MAX_LENGTH} characters", field="email"
            )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(id=id, email=email, created_at=created_at, updated_at=updated_at)
