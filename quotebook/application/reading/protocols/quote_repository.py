"""Protocol for the quote repository."""

from typing import Protocol

from quotebook.domain.common.value_objects.ids import LibraryEntryId, QuoteId, UserId
from quotebook.domain.reading.entities.quote import Quote


class QuoteRepositoryProtocol(Protocol):
    """Protocol for Quote persistence."""

    def find_by_id(self, quote_id: QuoteId, user_id: UserId) -> Quote | None:
        """
        Find a quote by ID, checking ownership through its library entry.

        Returns:
            Quote if found and its entry belongs to the user, None otherwise
        """
        ...

    def find_by_entry(self, entry_id: LibraryEntryId, favorite_only: bool = False) -> list[Quote]:
        """
        Get the quotes of one entry.

        Returns:
            Quotes ordered by created_at ASC
        """
        ...

    def find_recent_by_entry(self, entry_id: LibraryEntryId, limit: int) -> list[Quote]:
        """Get the newest quotes of one entry, created_at DESC."""
        ...

    def find_by_user(self, user_id: UserId, favorite_only: bool = False) -> list[Quote]:
        """
        Get every quote across the user's library.

        Returns:
            Quotes ordered by created_at ASC
        """
        ...

    def find_recent_by_user(self, user_id: UserId, limit: int) -> list[Quote]:
        """Get the newest quotes across the user's library, created_at DESC."""
        ...

    def count_by_entry(self, entry_id: LibraryEntryId) -> int: ...

    def count_by_entries(self, entry_ids: list[LibraryEntryId]) -> dict[LibraryEntryId, int]:
        """
        Count quotes for several entries in one query.

        Returns:
            Mapping of entry id to quote count; entries without quotes map to 0
        """
        ...

    def add(self, quote: Quote) -> Quote: ...

    def save(self, quote: Quote) -> Quote: ...

    def delete(self, quote_id: QuoteId) -> bool: ...

    def delete_by_entry(self, entry_id: LibraryEntryId) -> int:
        """
        Delete every quote of an entry.

        Returns:
            Number of deleted quotes
        """
        ...
