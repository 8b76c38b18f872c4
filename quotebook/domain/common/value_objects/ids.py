"""Typed identifiers for every entity in the system."""

from dataclasses import dataclass

from ..entity import EntityId, OpaqueEntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Account id, assigned by the identity store."""

    value: int


@dataclass(frozen=True)
class BookId(EntityId):
    """Catalog book id, assigned on insert."""

    value: int


@dataclass(frozen=True)
class LibraryEntryId(OpaqueEntityId):
    """Id of one book in one reader's library."""


@dataclass(frozen=True)
class QuoteId(OpaqueEntityId):
    """Id of a quote inside a library entry."""
