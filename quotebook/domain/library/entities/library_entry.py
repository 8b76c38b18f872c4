"""
Library entry: one catalog book in one reader's library.
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import Enum

from quotebook.domain.common.entity import Entity
from quotebook.domain.common.value_objects.ids import BookId, LibraryEntryId, UserId


class ReadingStatus(str, Enum):
    """Reading progress of a library entry."""

    READING = "READING"
    COMPLETED = "COMPLETED"


@dataclass
class LibraryEntry(Entity[LibraryEntryId]):
    """
    A reader's copy of a catalog book.

    Business Rules:
    - At most one entry per (user, book), enforced at repository level
    - New entries start as READING and not favorite
    - end_date is set only while the entry is COMPLETED
    - updated_at moves on every change to the entry or its quotes
    """

    id: LibraryEntryId
    user_id: UserId
    book_id: BookId
    reading_status: ReadingStatus
    is_favorite: bool
    created_at: datetime
    updated_at: datetime
    end_date: date | None = None

    @property
    def start_date(self) -> date:
        """Day the book was added to the library."""
        return self.created_at.date()

    def is_completed(self) -> bool:
        return self.reading_status == ReadingStatus.COMPLETED

    # Command methods
    def toggle_reading_status(self) -> None:
        """
        Flip between READING and COMPLETED.

        Completing records today as the end date; resuming clears it.
        """
        if self.is_completed():
            self.reading_status = ReadingStatus.READING
            self.end_date = None
        else:
            self.reading_status = ReadingStatus.COMPLETED
            self.end_date = datetime.now(UTC).date()
        self.touch()

    def toggle_favorite(self) -> None:
        self.is_favorite = not self.is_favorite
        self.touch()

    def touch(self) -> None:
        """Record activity on this entry."""
        self.updated_at = datetime.now(UTC)

    # Factory methods
    @classmethod
    def create(cls, user_id: UserId, book_id: BookId) -> "LibraryEntry":
        """Create a new entry in READING status."""
        now = datetime.now(UTC)
        return cls(
            id=LibraryEntryId.generate(),
            user_id=user_id,
            book_id=book_id,
            reading_status=ReadingStatus.READING,
            is_favorite=False,
            end_date=None,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: LibraryEntryId,
        user_id: UserId,
        book_id: BookId,
        reading_status: ReadingStatus,
        is_favorite: bool,
        created_at: datetime,
        updated_at: datetime,
        end_date: date | None = None,
    ) -> "LibraryEntry":
        """Reconstitute an entry from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            book_id=book_id,
            reading_status=reading_status,
            is_favorite=is_favorite,
            end_date=end_date,
            created_at=created_at,
            updated_at=updated_at,
        )
