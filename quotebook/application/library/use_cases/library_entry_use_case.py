"""Use case for managing the books in a user's library."""

from dataclasses import dataclass, field
from uuid import UUID

import structlog

from quotebook.application.common.unit_of_work import UnitOfWork
from quotebook.application.identity.protocols.user_repository import UserRepositoryProtocol
from quotebook.application.library.protocols.book_repository import BookRepositoryProtocol
from quotebook.application.library.protocols.library_entry_repository import (
    LibraryEntryRepositoryProtocol,
)
from quotebook.application.library.services.authorization_guard import AuthorizationGuard
from quotebook.application.library.use_cases.book_catalog_use_case import (
    BookCandidate,
    BookCatalogUseCase,
)
from quotebook.application.reading.protocols.quote_repository import QuoteRepositoryProtocol
from quotebook.domain.common.value_objects.ids import LibraryEntryId, UserId
from quotebook.domain.identity.exceptions import UserNotFoundError
from quotebook.domain.library.entities.book import Book
from quotebook.domain.library.entities.library_entry import LibraryEntry, ReadingStatus
from quotebook.domain.library.exceptions import (
    DuplicateLibraryEntryError,
    LibraryEntryAlreadyExistsError,
)
from quotebook.domain.reading.entities.quote import Quote
from quotebook.exceptions import ServiceError

logger = structlog.get_logger(__name__)

DEFAULT_RECENT_QUOTES_LIMIT = 4


@dataclass
class LibraryEntryDetails:
    """DTO for a library entry with its book and quote count."""

    entry: LibraryEntry
    book: Book
    quote_count: int


@dataclass
class RecentLibraryActivity:
    """DTO for the most recently active entry and its newest quotes."""

    details: LibraryEntryDetails | None
    quotes: list[Quote] = field(default_factory=list)


class LibraryEntryUseCase:
    """Use case for adding, reading, toggling and removing library entries."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        book_repository: BookRepositoryProtocol,
        entry_repository: LibraryEntryRepositoryProtocol,
        quote_repository: QuoteRepositoryProtocol,
        book_catalog: BookCatalogUseCase,
        authorization_guard: AuthorizationGuard,
        uow: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.user_repository = user_repository
        self.book_repository = book_repository
        self.entry_repository = entry_repository
        self.quote_repository = quote_repository
        self.book_catalog = book_catalog
        self.authorization_guard = authorization_guard
        self.uow = uow

    def add_to_library(self, user_id: int, candidate: BookCandidate) -> LibraryEntryDetails:
        """
        Add a catalog book to the user's library.

        The book is resolved through the catalog first, so two users adding the
        same book share one Book record.

        Args:
            user_id: ID of the acting user
            candidate: Catalog description of the book

        Returns:
            The new entry in READING status

        Raises:
            UserNotFoundError: If the user does not exist
            DuplicateLibraryEntryError: If the book is already in the user's library
        """
        user_id_vo = UserId(user_id)

        with self.uow:
            if self.user_repository.find_by_id(user_id_vo) is None:
                raise UserNotFoundError(user_id)

            book = self.book_catalog.find_or_create_book(candidate)

            existing = self.entry_repository.find_by_user_and_book(user_id_vo, book.id)
            if existing:
                raise DuplicateLibraryEntryError(existing.id.value)

            try:
                entry = self.entry_repository.add(LibraryEntry.create(user_id_vo, book.id))
            except LibraryEntryAlreadyExistsError as e:
                # Lost a race against a concurrent add of the same book
                winner = self.entry_repository.find_by_user_and_book(user_id_vo, book.id)
                if winner is None:
                    raise ServiceError("Failed to add book to library") from e
                raise DuplicateLibraryEntryError(winner.id.value) from e

            self.uow.commit()

        logger.info(
            "added_library_entry",
            entry_id=str(entry.id),
            user_id=user_id,
            book_id=book.id.value,
        )
        return LibraryEntryDetails(entry=entry, book=book, quote_count=0)

    def list_entries(
        self,
        user_id: int,
        favorite_only: bool = False,
        reading_status: ReadingStatus | None = None,
    ) -> list[LibraryEntryDetails]:
        """
        List the user's library, most recently active first.

        Args:
            user_id: ID of the user
            favorite_only: Only return favorite entries
            reading_status: Only return entries in this status

        Returns:
            List of entry details ordered by updated_at DESC
        """
        entries = self.entry_repository.find_by_user(
            UserId(user_id), favorite_only=favorite_only, reading_status=reading_status
        )
        return self._build_details(entries)

    def get_entry(self, user_id: int, entry_id: UUID) -> LibraryEntryDetails:
        entry = self.authorization_guard.require_owned_entry(
            LibraryEntryId(entry_id), UserId(user_id)
        )
        return self._build_details([entry])[0]

    def toggle_reading_status(self, user_id: int, entry_id: UUID) -> LibraryEntryDetails:
        """
        Switch an entry between READING and COMPLETED.

        Raises:
            LibraryEntryAccessDeniedError: If the entry is missing or not owned by the user
        """
        with self.uow:
            entry = self.authorization_guard.require_owned_entry(
                LibraryEntryId(entry_id), UserId(user_id)
            )
            entry.toggle_reading_status()
            entry = self.entry_repository.save(entry)
            self.uow.commit()

        logger.info(
            "toggled_reading_status",
            entry_id=str(entry_id),
            reading_status=entry.reading_status.value,
        )
        return self._build_details([entry])[0]

    def toggle_favorite(self, user_id: int, entry_id: UUID) -> LibraryEntryDetails:
        """
        Flip the favorite flag of an entry.

        Raises:
            LibraryEntryAccessDeniedError: If the entry is missing or not owned by the user
        """
        with self.uow:
            entry = self.authorization_guard.require_owned_entry(
                LibraryEntryId(entry_id), UserId(user_id)
            )
            entry.toggle_favorite()
            entry = self.entry_repository.save(entry)
            self.uow.commit()

        logger.info("toggled_entry_favorite", entry_id=str(entry_id), is_favorite=entry.is_favorite)
        return self._build_details([entry])[0]

    def delete_entry(self, user_id: int, entry_id: UUID) -> None:
        """
        Remove an entry and every quote attached to it.

        The catalog book stays, other readers may share it.

        Raises:
            LibraryEntryAccessDeniedError: If the entry is missing or not owned by the user
        """
        user_id_vo = UserId(user_id)

        with self.uow:
            entry = self.authorization_guard.require_owned_entry(
                LibraryEntryId(entry_id), user_id_vo
            )
            deleted_quotes = self.quote_repository.delete_by_entry(entry.id)
            self.entry_repository.delete(entry.id, user_id_vo)
            self.uow.commit()

        logger.info("deleted_library_entry", entry_id=str(entry_id), deleted_quotes=deleted_quotes)

    def quote_count(self, entry_id: UUID) -> int:
        return self.quote_repository.count_by_entry(LibraryEntryId(entry_id))

    def get_recent_with_quotes(
        self, user_id: int, quote_limit: int = DEFAULT_RECENT_QUOTES_LIMIT
    ) -> RecentLibraryActivity:
        """
        Get the most recently active entry with its newest quotes.

        Args:
            user_id: ID of the user
            quote_limit: Maximum number of quotes to include

        Returns:
            Activity with no details and no quotes when the library is empty
        """
        entry = self.entry_repository.find_most_recent(UserId(user_id))
        if entry is None:
            return RecentLibraryActivity(details=None, quotes=[])

        quotes = self.quote_repository.find_recent_by_entry(entry.id, quote_limit)
        return RecentLibraryActivity(details=self._build_details([entry])[0], quotes=quotes)

    def _build_details(self, entries: list[LibraryEntry]) -> list[LibraryEntryDetails]:
        if not entries:
            return []

        books = self.book_repository.find_by_ids(list({entry.book_id for entry in entries}))
        counts = self.quote_repository.count_by_entries([entry.id for entry in entries])

        return [
            LibraryEntryDetails(
                entry=entry,
                book=books[entry.book_id],
                quote_count=counts.get(entry.id, 0),
            )
            for entry in entries
        ]
