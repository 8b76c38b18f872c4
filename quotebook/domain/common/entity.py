"""
Identity types and the entity base class.

Catalog books and users get integer ids from the database. Library entries
and quotes are addressed by clients directly, so they carry random UUIDs that
the application generates up front.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """Typed wrapper around a database-assigned integer id."""

    value: int | UUID

    def __post_init__(self) -> None:
        if isinstance(self.value, int) and self.value < 0:
            raise ValueError(f"{type(self).__name__} cannot be negative")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Id for an entity that has not been inserted yet (0 until flushed)."""
        return cls(0)


@dataclass(frozen=True)
class OpaqueEntityId(EntityId):
    """Typed wrapper around a random UUID4, safe to expose in URLs."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise ValueError(f"{type(self).__name__} must wrap a UUID")

    @classmethod
    def generate(cls) -> Self:
        return cls(uuid4())


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Domain object with an identity.

    Subclasses declare an ``id`` of their own id type. Comparing two entities
    of the same class compares their ids only.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        return isinstance(other, type(self)) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
