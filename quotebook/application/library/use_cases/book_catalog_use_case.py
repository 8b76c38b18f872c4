"""Catalog deduplication: one Book per physical book."""

from dataclasses import dataclass, field
from datetime import date

import structlog

from quotebook.application.library.protocols.book_repository import BookRepositoryProtocol
from quotebook.domain.library.entities.book import Book
from quotebook.domain.library.exceptions import BookAlreadyExistsError
from quotebook.utils import extract_first_isbn

logger = structlog.get_logger(__name__)


@dataclass
class BookCandidate:
    """Book description as received from an external catalog search."""

    title: str
    isbn: str | None = None
    authors: list[str] = field(default_factory=list)
    translators: list[str] = field(default_factory=list)
    publisher: str | None = None
    synopsis: str | None = None
    cover_url: str | None = None
    published_date: date | None = None

    @property
    def first_isbn(self) -> str | None:
        return extract_first_isbn(self.isbn)

    @property
    def first_author(self) -> str:
        return self.authors[0] if self.authors else ""


class BookCatalogUseCase:
    """
    Canonicalizes catalog input into shared Book records.

    Runs inside the caller's unit of work and never commits on its own.
    """

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        self.book_repository = book_repository

    def find_or_create_book(self, candidate: BookCandidate) -> Book:
        """
        Return the canonical Book for a catalog description, creating it if needed.

        Lookups, first match wins:
        1. By the first isbn token, when there is one
        2. By (title, first author, publisher), when all three are non-empty

        Args:
            candidate: Catalog description of the book

        Returns:
            Existing or newly created Book
        """
        isbn = candidate.first_isbn
        if isbn:
            book = self.book_repository.find_by_isbn(isbn)
            if book:
                return book

        author = candidate.first_author
        if candidate.title and author and candidate.publisher:
            book = self.book_repository.find_by_title_author_publisher(
                candidate.title, author, candidate.publisher
            )
            if book:
                return book

        new_book = Book.create(
            title=candidate.title,
            authors=candidate.authors,
            translators=candidate.translators,
            publisher=candidate.publisher,
            isbn=isbn,
            synopsis=candidate.synopsis,
            cover_url=candidate.cover_url,
            published_date=candidate.published_date,
        )
        try:
            book = self.book_repository.add(new_book)
        except BookAlreadyExistsError:
            # Another request inserted the same book since our lookups
            winner = self._find_conflicting_book(isbn, candidate.title, author, candidate.publisher)
            if winner is None:
                raise
            logger.info("resolved_concurrent_book_insert", book_id=winner.id.value, isbn=isbn)
            return winner

        logger.info("created_catalog_book", book_id=book.id.value, isbn=isbn, title=book.title)
        return book

    def _find_conflicting_book(
        self, isbn: str | None, title: str, author: str, publisher: str | None
    ) -> Book | None:
        if isbn:
            book = self.book_repository.find_by_isbn(isbn)
            if book:
                return book
        return self.book_repository.find_by_title_author_publisher(title, author, publisher)
