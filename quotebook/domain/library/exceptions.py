"""Library domain exceptions."""

from quotebook.domain.common.exceptions import (
    AuthorizationError,
    BusinessRuleViolationError,
    DomainError,
)


class LibraryEntryAccessDeniedError(AuthorizationError):
    """Raised when a library entry is missing or owned by another user."""

    def __init__(self, entry_id: object) -> None:
        super().__init__(f"Access denied to library entry {entry_id}")
        self.entry_id = entry_id


class DuplicateLibraryEntryError(BusinessRuleViolationError):
    """Raised when a book is already in the user's library."""

    def __init__(self, existing_entry_id: object) -> None:
        super().__init__(
            "unique_library_entry", "This book is already in your library"
        )
        self.existing_entry_id = existing_entry_id


class BookAlreadyExistsError(DomainError):
    """Raised by the book repository when an insert loses a dedup-key race."""

    def __init__(self, isbn: str | None, title: str) -> None:
        super().__init__(
            f"Book '{title}' already exists in the catalog", {"isbn": isbn, "title": title}
        )
        self.isbn = isbn
        self.title = title


class LibraryEntryAlreadyExistsError(DomainError):
    """Raised by the entry repository when the (user, book) pair is already taken."""

    def __init__(self, user_id: int, book_id: int) -> None:
        super().__init__(
            f"User {user_id} already has book {book_id} in the library",
            {"user_id": user_id, "book_id": book_id},
        )
        self.user_id = user_id
        self.book_id = book_id
