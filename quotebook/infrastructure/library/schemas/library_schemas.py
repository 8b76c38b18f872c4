"""Pydantic schemas for library API request/response validation."""

from datetime import date, datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from quotebook.application.library.use_cases.book_catalog_use_case import BookCandidate
from quotebook.application.library.use_cases.library_entry_use_case import LibraryEntryDetails
from quotebook.domain.library.entities.book import (
    AUTHOR_MAX_LENGTH,
    COVER_URL_MAX_LENGTH,
    ISBN_MAX_LENGTH,
    PUBLISHER_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)
from quotebook.domain.library.entities.library_entry import ReadingStatus
from quotebook.infrastructure.reading.schemas import QuoteResponse
from quotebook.utils import extract_first_isbn, parse_published_date

PersonName = Annotated[str, Field(max_length=AUTHOR_MAX_LENGTH)]


class BookInfoRequest(BaseModel):
    """Book description as returned by the catalog search."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, description="Book title")
    isbn: str | None = Field(
        None, description="One or more space-separated ISBNs; only the first is kept"
    )
    authors: list[PersonName] = Field(default_factory=list, description="Authors in catalog order")
    translators: list[PersonName] = Field(default_factory=list, description="Translators")
    publisher: str | None = Field(
        None, max_length=PUBLISHER_MAX_LENGTH, description="Publisher name"
    )
    synopsis: str | None = Field(None, description="Short description of the book")
    cover_url: str | None = Field(
        None, max_length=COVER_URL_MAX_LENGTH, description="Cover image URL"
    )
    published_date: str | None = Field(
        None, description="Publication date, YYYY-MM-DD or ISO timestamp"
    )

    @field_validator("isbn")
    @classmethod
    def first_isbn_fits(cls, value: str | None) -> str | None:
        """Only the first code is stored, so only its length is limited."""
        first = extract_first_isbn(value)
        if first is not None and len(first) > ISBN_MAX_LENGTH:
            raise ValueError(f"First ISBN cannot exceed {ISBN_MAX_LENGTH} characters")
        return value

    def to_candidate(self) -> BookCandidate:
        return BookCandidate(
            title=self.title,
            isbn=self.isbn,
            authors=self.authors,
            translators=self.translators,
            publisher=self.publisher,
            synopsis=self.synopsis,
            cover_url=self.cover_url,
            published_date=parse_published_date(self.published_date),
        )


class AddBookRequest(BaseModel):
    """Schema for adding a book to the library."""

    book_info: BookInfoRequest = Field(..., description="Catalog description of the book")


class BookInfo(BaseModel):
    """Schema for catalog book data embedded in entry responses."""

    book_id: int
    title: str
    author: str
    authors: list[str]
    translators: list[str]
    publisher: str | None
    isbn: str | None
    synopsis: str | None
    cover_url: str | None
    published_date: date | None


class LibraryEntryResponse(BaseModel):
    """Schema for a library entry."""

    user_book_id: UUID
    book: BookInfo
    reading_status: ReadingStatus
    is_favorite: bool
    start_date: date
    end_date: date | None
    quote_count: int
    created_at: datetime
    updated_at: datetime


class AddBookResponse(LibraryEntryResponse):
    """Schema for the entry created by adding a book."""

    message: str = Field(..., description="Response message")


class RecentBookResponse(BaseModel):
    """Schema for the most recently active entry and its newest quotes."""

    recent_book: LibraryEntryResponse | None
    quotes: list[QuoteResponse]


def to_entry_response(details: LibraryEntryDetails) -> LibraryEntryResponse:
    entry = details.entry
    book = details.book
    return LibraryEntryResponse(
        user_book_id=entry.id.value,
        book=BookInfo(
            book_id=book.id.value,
            title=book.title,
            author=book.author,
            authors=book.authors,
            translators=book.translators,
            publisher=book.publisher,
            isbn=book.isbn,
            synopsis=book.synopsis,
            cover_url=book.cover_url,
            published_date=book.published_date,
        ),
        reading_status=entry.reading_status,
        is_favorite=entry.is_favorite,
        start_date=entry.start_date,
        end_date=entry.end_date,
        quote_count=details.quote_count,
        created_at=entry.created_at,
        updated_at=entry.updated_at,
    )
