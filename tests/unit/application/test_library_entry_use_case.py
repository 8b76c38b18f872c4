"""Tests for LibraryEntryUseCase with in-memory collaborators."""

from dataclasses import replace

import pytest

from quotebook.application.common.unit_of_work import UnitOfWork
from quotebook.application.library.services.authorization_guard import AuthorizationGuard
from quotebook.application.library.use_cases.book_catalog_use_case import (
    BookCandidate,
    BookCatalogUseCase,
)
from quotebook.application.library.use_cases.library_entry_use_case import LibraryEntryUseCase
from quotebook.domain.common.value_objects.ids import (
    BookId,
    LibraryEntryId,
    QuoteId,
    UserId,
)
from quotebook.domain.identity.entities.user import User
from quotebook.domain.identity.exceptions import UserNotFoundError
from quotebook.domain.library.entities.book import Book
from quotebook.domain.library.entities.library_entry import LibraryEntry, ReadingStatus
from quotebook.domain.library.exceptions import (
    DuplicateLibraryEntryError,
    LibraryEntryAccessDeniedError,
    LibraryEntryAlreadyExistsError,
)
from quotebook.domain.reading.entities.quote import Quote
from quotebook.exceptions import ServiceError


class FakeUnitOfWork(UnitOfWork):
    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


class FakeUserRepository:
    def __init__(self, users: list[User]) -> None:
        self.users = {user.id: user for user in users}

    def find_by_id(self, user_id: UserId) -> User | None:
        return self.users.get(user_id)


class FakeBookRepository:
    def __init__(self) -> None:
        self.books: dict[BookId, Book] = {}

    def find_by_ids(self, book_ids: list[BookId]) -> dict[BookId, Book]:
        return {book_id: self.books[book_id] for book_id in book_ids if book_id in self.books}

    def find_by_isbn(self, isbn: str) -> Book | None:
        return next((book for book in self.books.values() if book.isbn == isbn), None)

    def find_by_title_author_publisher(
        self, title: str, author: str, publisher: str | None
    ) -> Book | None:
        return None

    def add(self, book: Book) -> Book:
        saved = replace(book, id=BookId(len(self.books) + 1))
        self.books[saved.id] = saved
        return saved


class FakeEntryRepository:
    def __init__(self) -> None:
        self.entries: dict[LibraryEntryId, LibraryEntry] = {}

    def find_by_id(self, entry_id: LibraryEntryId, user_id: UserId) -> LibraryEntry | None:
        entry = self.entries.get(entry_id)
        return entry if entry and entry.user_id == user_id else None

    def find_by_user_and_book(self, user_id: UserId, book_id: BookId) -> LibraryEntry | None:
        return next(
            (
                entry
                for entry in self.entries.values()
                if entry.user_id == user_id and entry.book_id == book_id
            ),
            None,
        )

    def find_by_user(
        self,
        user_id: UserId,
        favorite_only: bool = False,
        reading_status: ReadingStatus | None = None,
    ) -> list[LibraryEntry]:
        entries = [
            entry
            for entry in self.entries.values()
            if entry.user_id == user_id
            and (not favorite_only or entry.is_favorite)
            and (reading_status is None or entry.reading_status == reading_status)
        ]
        return sorted(entries, key=lambda entry: entry.updated_at, reverse=True)

    def find_most_recent(self, user_id: UserId) -> LibraryEntry | None:
        entries = self.find_by_user(user_id)
        return entries[0] if entries else None

    def add(self, entry: LibraryEntry) -> LibraryEntry:
        if self.find_by_user_and_book(entry.user_id, entry.book_id):
            raise LibraryEntryAlreadyExistsError(entry.user_id.value, entry.book_id.value)
        self.entries[entry.id] = entry
        return entry

    def save(self, entry: LibraryEntry) -> LibraryEntry:
        self.entries[entry.id] = entry
        return entry

    def delete(self, entry_id: LibraryEntryId, user_id: UserId) -> None:
        self.entries.pop(entry_id, None)


class RacingEntryRepository(FakeEntryRepository):
    """Another request adds the same book right after our duplicate check."""

    def __init__(self, winner: LibraryEntry | None) -> None:
        super().__init__()
        self.winner = winner

    def add(self, entry: LibraryEntry) -> LibraryEntry:
        if self.winner is not None:
            self.entries[self.winner.id] = self.winner
        raise LibraryEntryAlreadyExistsError(entry.user_id.value, entry.book_id.value)


class FakeQuoteRepository:
    def __init__(self) -> None:
        self.quotes: dict[QuoteId, Quote] = {}

    def find_by_id(self, quote_id: QuoteId, user_id: UserId) -> Quote | None:
        return self.quotes.get(quote_id)

    def find_recent_by_entry(self, entry_id: LibraryEntryId, limit: int) -> list[Quote]:
        quotes = [quote for quote in self.quotes.values() if quote.library_entry_id == entry_id]
        return sorted(quotes, key=lambda quote: quote.created_at, reverse=True)[:limit]

    def count_by_entry(self, entry_id: LibraryEntryId) -> int:
        return sum(1 for quote in self.quotes.values() if quote.library_entry_id == entry_id)

    def count_by_entries(self, entry_ids: list[LibraryEntryId]) -> dict[LibraryEntryId, int]:
        return {entry_id: self.count_by_entry(entry_id) for entry_id in entry_ids}

    def add(self, quote: Quote) -> Quote:
        self.quotes[quote.id] = quote
        return quote

    def delete_by_entry(self, entry_id: LibraryEntryId) -> int:
        doomed = [
            quote_id
            for quote_id, quote in self.quotes.items()
            if quote.library_entry_id == entry_id
        ]
        for quote_id in doomed:
            del self.quotes[quote_id]
        return len(doomed)


READER = User.create_with_id(id=UserId(1), email="reader@example.com")
CANDIDATE = BookCandidate(title="Solaris", isbn="0156027607", authors=["Stanisław Lem"])


def build_use_case(
    entry_repository: FakeEntryRepository | None = None,
) -> tuple[LibraryEntryUseCase, FakeEntryRepository, FakeQuoteRepository, FakeUnitOfWork]:
    books = FakeBookRepository()
    entries = entry_repository or FakeEntryRepository()
    quotes = FakeQuoteRepository()
    uow = FakeUnitOfWork()
    use_case = LibraryEntryUseCase(
        user_repository=FakeUserRepository([READER]),
        book_repository=books,
        entry_repository=entries,
        quote_repository=quotes,
        book_catalog=BookCatalogUseCase(books),
        authorization_guard=AuthorizationGuard(entries, quotes),
        uow=uow,
    )
    return use_case, entries, quotes, uow


class TestAddToLibrary:
    def test_adds_entry_and_commits(self) -> None:
        use_case, entries, _, uow = build_use_case()

        details = use_case.add_to_library(1, CANDIDATE)

        assert details.entry.reading_status == ReadingStatus.READING
        assert details.book.title == "Solaris"
        assert details.quote_count == 0
        assert list(entries.entries) == [details.entry.id]
        assert uow.commits == 1

    def test_unknown_user_is_rejected(self) -> None:
        use_case, entries, _, uow = build_use_case()

        with pytest.raises(UserNotFoundError):
            use_case.add_to_library(999, CANDIDATE)

        assert entries.entries == {}
        assert uow.commits == 0
        assert uow.rollbacks == 1

    def test_duplicate_reports_existing_entry(self) -> None:
        use_case, _, _, uow = build_use_case()
        first = use_case.add_to_library(1, CANDIDATE)

        with pytest.raises(DuplicateLibraryEntryError) as exc_info:
            use_case.add_to_library(1, CANDIDATE)

        assert exc_info.value.existing_entry_id == first.entry.id.value
        assert uow.commits == 1

    def test_lost_race_reports_winning_entry(self) -> None:
        winner = LibraryEntry.create(UserId(1), BookId(1))
        use_case, _, _, uow = build_use_case(RacingEntryRepository(winner))

        with pytest.raises(DuplicateLibraryEntryError) as exc_info:
            use_case.add_to_library(1, CANDIDATE)

        assert exc_info.value.existing_entry_id == winner.id.value
        assert uow.rollbacks == 1

    def test_race_without_visible_winner_is_a_service_error(self) -> None:
        use_case, _, _, _ = build_use_case(RacingEntryRepository(None))

        with pytest.raises(ServiceError):
            use_case.add_to_library(1, CANDIDATE)


class TestEntryLifecycle:
    def test_toggle_reading_status_round_trip(self) -> None:
        use_case, _, _, _ = build_use_case()
        entry_id = use_case.add_to_library(1, CANDIDATE).entry.id.value

        completed = use_case.toggle_reading_status(1, entry_id)
        assert completed.entry.reading_status == ReadingStatus.COMPLETED
        assert completed.entry.end_date is not None

        reading = use_case.toggle_reading_status(1, entry_id)
        assert reading.entry.reading_status == ReadingStatus.READING
        assert reading.entry.end_date is None

    def test_other_user_cannot_toggle(self) -> None:
        use_case, _, _, uow = build_use_case()
        entry_id = use_case.add_to_library(1, CANDIDATE).entry.id.value

        with pytest.raises(LibraryEntryAccessDeniedError):
            use_case.toggle_favorite(2, entry_id)

        assert uow.commits == 1

    def test_delete_removes_quotes(self) -> None:
        use_case, entries, quotes, _ = build_use_case()
        entry = use_case.add_to_library(1, CANDIDATE).entry
        quotes.add(Quote.create(entry.id, "We don't want to conquer the cosmos."))
        quotes.add(Quote.create(entry.id, "We are only seeking Man."))

        use_case.delete_entry(1, entry.id.value)

        assert entries.entries == {}
        assert quotes.quotes == {}

    def test_recent_activity_on_empty_library(self) -> None:
        use_case, _, _, _ = build_use_case()

        activity = use_case.get_recent_with_quotes(1)

        assert activity.details is None
        assert activity.quotes == []

    def test_recent_activity_limits_quotes(self) -> None:
        use_case, _, quotes, _ = build_use_case()
        entry = use_case.add_to_library(1, CANDIDATE).entry
        for number in range(6):
            quotes.add(Quote.create(entry.id, f"Quote {number}"))

        activity = use_case.get_recent_with_quotes(1, quote_limit=4)

        assert activity.details is not None
        assert activity.details.quote_count == 6
        assert len(activity.quotes) == 4

    def test_quote_count_tracks_quotes(self) -> None:
        use_case, _, quotes, _ = build_use_case()
        entry = use_case.add_to_library(1, CANDIDATE).entry
        assert use_case.quote_count(entry.id.value) == 0

        quotes.add(Quote.create(entry.id, "We have no need of other worlds."))

        assert use_case.quote_count(entry.id.value) == 1
