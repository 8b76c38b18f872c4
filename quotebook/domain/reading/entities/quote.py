"""
Quote entity: a passage the reader kept from a book.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from quotebook.domain.common.entity import Entity
from quotebook.domain.common.exceptions import ValidationError
from quotebook.domain.common.value_objects.ids import LibraryEntryId, QuoteId

MAX_QUOTE_LENGTH = 1000


def _normalize_text(text: str) -> str:
    stripped = text.strip() if text else ""
    if not stripped:
        raise ValidationError("Quote text cannot be empty", field="text")
    if len(stripped) > MAX_QUOTE_LENGTH:
        raise ValidationError(
            f"Quote text cannot exceed {MAX_QUOTE_LENGTH} characters",
            field="text",
            value=len(stripped),
        )
    return stripped


def _validate_page(page: int | None) -> None:
    if page is not None and page < 1:
        raise ValidationError("Page must be a positive number", field="page", value=page)


@dataclass
class Quote(Entity[QuoteId]):
    """
    Quote attached to a library entry.

    Business Rules:
    - Text is stored trimmed, non-empty, at most MAX_QUOTE_LENGTH characters
    - Page is optional, positive when given
    - Ownership is resolved through the parent entry; quotes carry no user id
    """

    id: QuoteId
    library_entry_id: LibraryEntryId
    text: str
    is_favorite: bool
    created_at: datetime
    updated_at: datetime
    page: int | None = None

    def update(self, text: str, page: int | None) -> None:
        """
        Replace text and page.

        Raises:
            ValidationError: If the text is blank or too long, or the page is not positive
        """
        normalized = _normalize_text(text)
        _validate_page(page)
        self.text = normalized
        self.page = page
        self.updated_at = datetime.now(UTC)

    def toggle_favorite(self) -> None:
        self.is_favorite = not self.is_favorite
        self.updated_at = datetime.now(UTC)

    def belongs_to(self, entry_id: LibraryEntryId) -> bool:
        return self.library_entry_id == entry_id

    @classmethod
    def create(
        cls, library_entry_id: LibraryEntryId, text: str, page: int | None = None
    ) -> "Quote":
        """
        Create a new quote.

        Raises:
            ValidationError: If the text is blank or too long, or the page is not positive
        """
        normalized = _normalize_text(text)
        _validate_page(page)
        now = datetime.now(UTC)
        return cls(
            id=QuoteId.generate(),
            library_entry_id=library_entry_id,
            text=normalized,
            page=page,
            is_favorite=False,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: QuoteId,
        library_entry_id: LibraryEntryId,
        text: str,
        is_favorite: bool,
        created_at: datetime,
        updated_at: datetime,
        page: int | None = None,
    ) -> "Quote":
        """Reconstitute a quote from persistence."""
        return cls(
            id=id,
            library_entry_id=library_entry_id,
            text=text,
            page=page,
            is_favorite=is_favorite,
            created_at=created_at,
            updated_at=updated_at,
        )
