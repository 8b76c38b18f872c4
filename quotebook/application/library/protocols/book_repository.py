"""Protocol for the catalog book repository."""

from typing import Protocol

from quotebook.domain.common.value_objects.ids import BookId
from quotebook.domain.library.entities.book import Book


class BookRepositoryProtocol(Protocol):
    """Protocol for catalog Book persistence."""

    def find_by_ids(self, book_ids: list[BookId]) -> dict[BookId, Book]:
        """
        Load several books at once.

        Returns:
            Mapping of book id to Book; ids with no book are left out
        """
        ...

    def find_by_isbn(self, isbn: str) -> Book | None: ...

    def find_by_title_author_publisher(
        self, title: str, author: str, publisher: str | None
    ) -> Book | None:
        """
        Find a book by its natural key.

        Args:
            title: Exact title
            author: First author ("" for books without authors)
            publisher: Exact publisher, None matches books without one

        Returns:
            Book if found, None otherwise
        """
        ...

    def add(self, book: Book) -> Book:
        """
        Insert a new catalog book.

        Returns:
            Saved book with its database-assigned id

        Raises:
            BookAlreadyExistsError: If the isbn or the natural key is already taken
        """
        ...
