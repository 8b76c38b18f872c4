"""Tests for BookCatalogUseCase deduplication."""

from dataclasses import replace

import pytest

from quotebook.application.library.use_cases.book_catalog_use_case import (
    BookCandidate,
    BookCatalogUseCase,
)
from quotebook.domain.common.value_objects.ids import BookId
from quotebook.domain.library.entities.book import Book
from quotebook.domain.library.exceptions import BookAlreadyExistsError


class InMemoryBookRepository:
    """Book repository double enforcing the same unique keys as the database."""

    def __init__(self) -> None:
        self.books: list[Book] = []
        self.add_calls = 0

    def find_by_ids(self, book_ids: list[BookId]) -> dict[BookId, Book]:
        return {book.id: book for book in self.books if book.id in book_ids}

    def find_by_isbn(self, isbn: str) -> Book | None:
        return next((book for book in self.books if book.isbn == isbn), None)

    def find_by_title_author_publisher(
        self, title: str, author: str, publisher: str | None
    ) -> Book | None:
        return next(
            (
                book
                for book in self.books
                if (book.title, book.author, book.publisher) == (title, author, publisher)
            ),
            None,
        )

    def add(self, book: Book) -> Book:
        self.add_calls += 1
        if book.isbn and self.find_by_isbn(book.isbn):
            raise BookAlreadyExistsError(book.isbn, book.title)
        if book.publisher is not None and self.find_by_title_author_publisher(
            book.title, book.author, book.publisher
        ):
            raise BookAlreadyExistsError(book.isbn, book.title)
        saved = replace(book, id=BookId(len(self.books) + 1))
        self.books.append(saved)
        return saved


class RacingBookRepository(InMemoryBookRepository):
    """Simulates another request inserting the same book between lookup and insert."""

    def __init__(self, winner: Book) -> None:
        super().__init__()
        self.winner = winner

    def add(self, book: Book) -> Book:
        if self.winner not in self.books:
            self.books.append(self.winner)
        return super().add(book)


@pytest.fixture
def repository() -> InMemoryBookRepository:
    return InMemoryBookRepository()


@pytest.fixture
def catalog(repository: InMemoryBookRepository) -> BookCatalogUseCase:
    return BookCatalogUseCase(repository)


def _candidate(**overrides) -> BookCandidate:
    fields = {
        "title": "Kindred",
        "isbn": "0807083690 9780807083697",
        "authors": ["Octavia E. Butler"],
        "publisher": "Beacon Press",
    }
    fields.update(overrides)
    return BookCandidate(**fields)


class TestFindOrCreateBook:
    def test_creates_book_with_first_isbn(self, catalog: BookCatalogUseCase) -> None:
        book = catalog.find_or_create_book(_candidate())

        assert book.id.value > 0
        assert book.isbn == "0807083690"
        assert book.authors == ["Octavia E. Butler"]

    def test_same_isbn_is_idempotent(
        self, catalog: BookCatalogUseCase, repository: InMemoryBookRepository
    ) -> None:
        first = catalog.find_or_create_book(_candidate())
        second = catalog.find_or_create_book(_candidate(title="Kindred (Reissue)", publisher="X"))

        assert second.id == first.id
        assert len(repository.books) == 1

    def test_only_first_isbn_token_is_compared(
        self, catalog: BookCatalogUseCase, repository: InMemoryBookRepository
    ) -> None:
        first = catalog.find_or_create_book(_candidate())
        second = catalog.find_or_create_book(_candidate(isbn="0807083690"))

        assert second.id == first.id

    def test_title_author_publisher_match_without_isbn(
        self, catalog: BookCatalogUseCase, repository: InMemoryBookRepository
    ) -> None:
        first = catalog.find_or_create_book(_candidate(isbn=None))
        second = catalog.find_or_create_book(_candidate(isbn="   "))

        assert second.id == first.id
        assert len(repository.books) == 1

    def test_triple_lookup_is_skipped_without_publisher(
        self, catalog: BookCatalogUseCase, repository: InMemoryBookRepository
    ) -> None:
        catalog.find_or_create_book(_candidate(isbn=None, publisher=None))
        catalog.find_or_create_book(_candidate(isbn=None, publisher=None))

        assert len(repository.books) == 2

    def test_new_isbn_still_matches_existing_triple(
        self, catalog: BookCatalogUseCase, repository: InMemoryBookRepository
    ) -> None:
        first = catalog.find_or_create_book(_candidate(isbn=None))
        second = catalog.find_or_create_book(_candidate(isbn="1111111111"))

        assert second.id == first.id
        assert repository.add_calls == 1

    def test_different_books_are_kept_apart(
        self, catalog: BookCatalogUseCase, repository: InMemoryBookRepository
    ) -> None:
        catalog.find_or_create_book(_candidate())
        catalog.find_or_create_book(_candidate(title="Dawn", isbn="0446603775"))

        assert len(repository.books) == 2


class TestConcurrentInsert:
    def test_lost_isbn_race_returns_winner(self) -> None:
        winner = Book.create(title="Kindred", isbn="0807083690", publisher="Beacon Press")
        winner = replace(winner, id=BookId(99))
        catalog = BookCatalogUseCase(RacingBookRepository(winner))

        book = catalog.find_or_create_book(_candidate())

        assert book.id == BookId(99)

    def test_lost_triple_race_returns_winner(self) -> None:
        winner = Book.create(
            title="Kindred", authors=["Octavia E. Butler"], publisher="Beacon Press"
        )
        winner = replace(winner, id=BookId(42))
        catalog = BookCatalogUseCase(RacingBookRepository(winner))

        book = catalog.find_or_create_book(_candidate(isbn=None))

        assert book.id == BookId(42)
