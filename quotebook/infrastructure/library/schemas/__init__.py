"""Library context schemas."""

from quotebook.infrastructure.library.schemas.library_schemas import (
    AddBookRequest,
    AddBookResponse,
    BookInfo,
    BookInfoRequest,
    LibraryEntryResponse,
    RecentBookResponse,
    to_entry_response,
)

__all__ = [
    "AddBookRequest",
    "AddBookResponse",
    "BookInfo",
    "BookInfoRequest",
    "LibraryEntryResponse",
    "RecentBookResponse",
    "to_entry_response",
]
