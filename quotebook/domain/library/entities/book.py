from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from quotebook.domain.common.entity import Entity
from quotebook.domain.common.exceptions import ValidationError
from quotebook.domain.common.value_objects.ids import BookId
from quotebook.utils import extract_first_isbn

TITLE_MAX_LENGTH = 500
AUTHOR_MAX_LENGTH = 500
PUBLISHER_MAX_LENGTH = 255
ISBN_MAX_LENGTH = 20
COVER_URL_MAX_LENGTH = 1000


@dataclass
class Book(Entity[BookId]):
    """
    Canonical catalog book.

    One record per physical book, shared by every reader that adds it to
    their library. Books are created once by the catalog and never updated.
    """

    # Identity
    id: BookId

    # Essential metadata
    title: str

    # Timestamps
    created_at: datetime

    # Optional fields
    authors: list[str] = field(default_factory=list)
    translators: list[str] = field(default_factory=list)
    publisher: str | None = None
    isbn: str | None = None
    synopsis: str | None = None
    cover_url: str | None = None
    published_date: date | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Book title cannot be empty", field="title")
        if self.isbn is not None and len(self.isbn) > ISBN_MAX_LENGTH:
            raise ValidationError(
                f"ISBN cannot exceed {ISBN_MAX_LENGTH} characters", field="isbn", value=self.isbn
            )

    @property
    def author(self) -> str:
        """First author, or "" when the book has none. Part of the dedup key."""
        return self.authors[0] if self.authors else ""

    # Factory methods
    @classmethod
    def create(
        cls,
        title: str,
        authors: list[str] | None = None,
        translators: list[str] | None = None,
        publisher: str | None = None,
        isbn: str | None = None,
        synopsis: str | None = None,
        cover_url: str | None = None,
        published_date: date | None = None,
    ) -> "Book":
        """Factory for creating a new catalog book.

        Only the first token of a multi-code isbn field is stored.
        """
        return cls(
            id=BookId.generate(),
            title=title,
            authors=list(authors or []),
            translators=list(translators or []),
            publisher=publisher,
            isbn=extract_first_isbn(isbn),
            synopsis=synopsis,
            cover_url=cover_url,
            published_date=published_date,
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: BookId,
        title: str,
        created_at: datetime,
        authors: list[str] | None = None,
        translators: list[str] | None = None,
        publisher: str | None = None,
        isbn: str | None = None,
        synopsis: str | None = None,
        cover_url: str | None = None,
        published_date: date | None = None,
    ) -> "Book":
        """Factory for reconstituting book from persistence."""
        return cls(
            id=id,
            title=title,
            authors=list(authors or []),
            translators=list(translators or []),
            publisher=publisher,
            isbn=isbn,
            synopsis=synopsis,
            cover_url=cover_url,
            published_date=published_date,
            created_at=created_at,
        )
