"""Use case for quote operations."""

from uuid import UUID

import structlog

from quotebook.application.common.unit_of_work import UnitOfWork
from quotebook.application.library.protocols.library_entry_repository import (
    LibraryEntryRepositoryProtocol,
)
from quotebook.application.library.services.authorization_guard import AuthorizationGuard
from quotebook.application.reading.protocols.quote_repository import QuoteRepositoryProtocol
from quotebook.domain.common.value_objects.ids import LibraryEntryId, QuoteId, UserId
from quotebook.domain.library.entities.library_entry import LibraryEntry
from quotebook.domain.reading.entities.quote import Quote
from quotebook.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class QuoteLedgerUseCase:
    """
    Use case for the quotes kept inside library entries.

    Every quote is reached through its entry: the entry must belong to the
    acting user and the quote must belong to the entry. Mutations count as
    activity on the entry and move its updated_at.
    """

    def __init__(
        self,
        entry_repository: LibraryEntryRepositoryProtocol,
        quote_repository: QuoteRepositoryProtocol,
        authorization_guard: AuthorizationGuard,
        uow: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.entry_repository = entry_repository
        self.quote_repository = quote_repository
        self.authorization_guard = authorization_guard
        self.uow = uow

    def add_quote(self, user_id: int, entry_id: UUID, text: str, page: int | None = None) -> Quote:
        """
        Add a quote to a library entry.

        Args:
            user_id: ID of the user
            entry_id: ID of the library entry
            text: Quote text, trimmed before storing
            page: Optional page number

        Returns:
            Created quote

        Raises:
            LibraryEntryAccessDeniedError: If the entry is missing or not owned by the user
            ValidationError: If the text is blank or too long
        """
        with self.uow:
            entry = self.authorization_guard.require_owned_entry(
                LibraryEntryId(entry_id), UserId(user_id)
            )
            quote = self.quote_repository.add(Quote.create(entry.id, text, page))
            self._touch_entry(entry)
            self.uow.commit()

        logger.info("added_quote", quote_id=str(quote.id), entry_id=str(entry_id))
        return quote

    def list_quotes(self, user_id: int, entry_id: UUID, favorite_only: bool = False) -> list[Quote]:
        """
        List the quotes of an entry, oldest first.

        Raises:
            LibraryEntryAccessDeniedError: If the entry is missing or not owned by the user
        """
        entry = self.authorization_guard.require_owned_entry(
            LibraryEntryId(entry_id), UserId(user_id)
        )
        return self.quote_repository.find_by_entry(entry.id, favorite_only=favorite_only)

    def get_quote(self, user_id: int, entry_id: UUID, quote_id: UUID) -> Quote:
        _, quote = self._resolve(user_id, entry_id, quote_id)
        return quote

    def update_quote(
        self, user_id: int, entry_id: UUID, quote_id: UUID, text: str, page: int | None
    ) -> Quote:
        """
        Replace the text and page of a quote.

        Raises:
            LibraryEntryAccessDeniedError: If the entry is missing or not owned by the user
            QuoteAccessDeniedError: If the quote is missing or not owned by the user
            QuoteNotInEntryError: If the quote belongs to another entry
            ValidationError: If the text is blank or too long
        """
        with self.uow:
            entry, quote = self._resolve(user_id, entry_id, quote_id)
            quote.update(text, page)
            quote = self.quote_repository.save(quote)
            self._touch_entry(entry)
            self.uow.commit()

        logger.info("updated_quote", quote_id=str(quote_id))
        return quote

    def toggle_favorite(self, user_id: int, entry_id: UUID, quote_id: UUID) -> Quote:
        with self.uow:
            entry, quote = self._resolve(user_id, entry_id, quote_id)
            quote.toggle_favorite()
            quote = self.quote_repository.save(quote)
            self._touch_entry(entry)
            self.uow.commit()

        logger.info("toggled_quote_favorite", quote_id=str(quote_id), is_favorite=quote.is_favorite)
        return quote

    def delete_quote(self, user_id: int, entry_id: UUID, quote_id: UUID) -> None:
        with self.uow:
            entry, quote = self._resolve(user_id, entry_id, quote_id)
            self.quote_repository.delete(quote.id)
            self._touch_entry(entry)
            self.uow.commit()

        logger.info("deleted_quote", quote_id=str(quote_id), entry_id=str(entry_id))

    def get_recent_quotes(self, user_id: int, limit: int) -> list[Quote]:
        """
        Get the newest quotes across the user's whole library.

        Raises:
            ValidationError: If limit is not positive
        """
        if limit < 1:
            raise ValidationError("Limit must be a positive number")
        return self.quote_repository.find_recent_by_user(UserId(user_id), limit)

    def list_all_quotes(self, user_id: int, favorite_only: bool = False) -> list[Quote]:
        """List every quote of the user, oldest first."""
        return self.quote_repository.find_by_user(UserId(user_id), favorite_only=favorite_only)

    def _resolve(self, user_id: int, entry_id: UUID, quote_id: UUID) -> tuple[LibraryEntry, Quote]:
        user_id_vo = UserId(user_id)
        entry_id_vo = LibraryEntryId(entry_id)

        entry = self.authorization_guard.require_owned_entry(entry_id_vo, user_id_vo)
        quote = self.authorization_guard.require_owned_quote(QuoteId(quote_id), user_id_vo)
        self.authorization_guard.require_quote_in_entry(quote, entry_id_vo)
        return entry, quote

    def _touch_entry(self, entry: LibraryEntry) -> None:
        entry.touch()
        self.entry_repository.save(entry)
