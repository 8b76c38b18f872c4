"""Infrastructure layer repositories for library bounded context."""

from quotebook.infrastructure.library.repositories.book_repository import BookRepository
from quotebook.infrastructure.library.repositories.library_entry_repository import (
    LibraryEntryRepository,
)

__all__ = ["BookRepository", "LibraryEntryRepository"]
