"""Library domain layer."""

from quotebook.domain.library.entities.book import Book
from quotebook.domain.library.entities.library_entry import LibraryEntry, ReadingStatus
from quotebook.domain.library.exceptions import (
    BookAlreadyExistsError,
    DuplicateLibraryEntryError,
    LibraryEntryAccessDeniedError,
    LibraryEntryAlreadyExistsError,
)

__all__ = [
    "Book",
    "BookAlreadyExistsError",
    "DuplicateLibraryEntryError",
    "LibraryEntry",
    "LibraryEntryAccessDeniedError",
    "LibraryEntryAlreadyExistsError",
    "ReadingStatus",
]
