"""Protocol for the library entry repository."""

from typing import Protocol

from quotebook.domain.common.value_objects.ids import BookId, LibraryEntryId, UserId
from quotebook.domain.library.entities.library_entry import LibraryEntry, ReadingStatus


class LibraryEntryRepositoryProtocol(Protocol):
    """Protocol for LibraryEntry persistence. Every lookup is scoped to an owner."""

    def find_by_id(self, entry_id: LibraryEntryId, user_id: UserId) -> LibraryEntry | None:
        """
        Find an entry by ID with user ownership check.

        Returns:
            LibraryEntry if found and owned by user, None otherwise
        """
        ...

    def find_by_user_and_book(self, user_id: UserId, book_id: BookId) -> LibraryEntry | None: ...

    def find_by_user(
        self,
        user_id: UserId,
        favorite_only: bool = False,
        reading_status: ReadingStatus | None = None,
    ) -> list[LibraryEntry]:
        """
        List a user's entries.

        Returns:
            Entries matching the filters ordered by updated_at DESC
        """
        ...

    def find_most_recent(self, user_id: UserId) -> LibraryEntry | None:
        """Return the entry with the latest activity, if any."""
        ...

    def add(self, entry: LibraryEntry) -> LibraryEntry:
        """
        Insert a new entry.

        Raises:
            LibraryEntryAlreadyExistsError: If the user already has an entry for the book
        """
        ...

    def save(self, entry: LibraryEntry) -> LibraryEntry:
        """Persist changes to an existing entry."""
        ...

    def delete(self, entry_id: LibraryEntryId, user_id: UserId) -> bool:
        """
        Delete an entry.

        Returns:
            True if deleted, False if not found
        """
        ...
