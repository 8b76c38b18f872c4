"""Ownership checks for library entries and the quotes inside them."""

from quotebook.application.library.protocols.library_entry_repository import (
    LibraryEntryRepositoryProtocol,
)
from quotebook.application.reading.protocols.quote_repository import QuoteRepositoryProtocol
from quotebook.domain.common.value_objects.ids import LibraryEntryId, QuoteId, UserId
from quotebook.domain.library.entities.library_entry import LibraryEntry
from quotebook.domain.library.exceptions import LibraryEntryAccessDeniedError
from quotebook.domain.reading.entities.quote import Quote
from quotebook.domain.reading.exceptions import QuoteAccessDeniedError, QuoteNotInEntryError


class AuthorizationGuard:
    """
    Resolves resources on behalf of a user.

    Missing and foreign resources are reported the same way, so a caller
    cannot tell whether another user's entry or quote exists. A quote's
    owner is always read fresh from its parent entry.
    """

    def __init__(
        self,
        entry_repository: LibraryEntryRepositoryProtocol,
        quote_repository: QuoteRepositoryProtocol,
    ) -> None:
        self.entry_repository = entry_repository
        self.quote_repository = quote_repository

    def require_owned_entry(self, entry_id: LibraryEntryId, user_id: UserId) -> LibraryEntry:
        """
        Load an entry owned by the user.

        Raises:
            LibraryEntryAccessDeniedError: If the entry is missing or belongs to someone else
        """
        entry = self.entry_repository.find_by_id(entry_id, user_id)
        if entry is None:
            raise LibraryEntryAccessDeniedError(entry_id)
        return entry

    def require_owned_quote(self, quote_id: QuoteId, user_id: UserId) -> Quote:
        """
        Load a quote whose entry is owned by the user.

        Raises:
            QuoteAccessDeniedError: If the quote is missing or belongs to someone else
        """
        quote = self.quote_repository.find_by_id(quote_id, user_id)
        if quote is None:
            raise QuoteAccessDeniedError(quote_id)
        return quote

    def require_quote_in_entry(self, quote: Quote, entry_id: LibraryEntryId) -> None:
        """
        Raises:
            QuoteNotInEntryError: If the quote was addressed through another entry
        """
        if not quote.belongs_to(entry_id):
            raise QuoteNotInEntryError(quote.id, entry_id)
