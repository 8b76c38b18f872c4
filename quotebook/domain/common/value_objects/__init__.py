"""Common value objects shared across all domain modules."""

from .ids import BookId, LibraryEntryId, QuoteId, UserId

__all__ = [
    "BookId",
    "LibraryEntryId",
    "QuoteId",
    "UserId",
]
