"""Repository for catalog Book entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from quotebook.domain.common.value_objects.ids import BookId
from quotebook.domain.library.entities.book import Book
from quotebook.domain.library.exceptions import BookAlreadyExistsError
from quotebook.infrastructure.library.mappers.book_mapper import BookMapper
from quotebook.models import Book as BookORM

logger = logging.getLogger(__name__)


class BookRepository:
    """Repository for catalog Book entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BookMapper()

    def find_by_ids(self, book_ids: list[BookId]) -> dict[BookId, Book]:
        if not book_ids:
            return {}
        stmt = select(BookORM).where(BookORM.id.in_([book_id.value for book_id in book_ids]))
        orm_models = self.db.execute(stmt).scalars().all()
        return {BookId(orm.id): self.mapper.to_domain(orm) for orm in orm_models}

    def find_by_isbn(self, isbn: str) -> Book | None:
        stmt = select(BookORM).where(BookORM.isbn == isbn)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_title_author_publisher(
        self, title: str, author: str, publisher: str | None
    ) -> Book | None:
        """
        Find a book by the (title, first author, publisher) unique key.

        Args:
            title: Exact title
            author: First author, "" for books without authors
            publisher: Exact publisher, None matches books without one

        Returns:
            Book entity if found, None otherwise
        """
        publisher_clause = (
            BookORM.publisher.is_(None) if publisher is None else BookORM.publisher == publisher
        )
        stmt = (
            select(BookORM)
            .where(BookORM.title == title, BookORM.author == author, publisher_clause)
            .order_by(BookORM.id)
            .limit(1)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def add(self, book: Book) -> Book:
        """
        Insert a new catalog book.

        The insert runs in a savepoint so a unique violation leaves the
        surrounding transaction usable for re-reading the winning row.

        Raises:
            BookAlreadyExistsError: If the isbn or (title, author, publisher) is taken
        """
        orm_model = self.mapper.to_orm(book)
        try:
            with self.db.begin_nested():
                self.db.add(orm_model)
        except IntegrityError as e:
            logger.info(f"Book insert lost dedup race: isbn={book.isbn} title={book.title!r}")
            raise BookAlreadyExistsError(book.isbn, book.title) from e

        logger.info(f"Created catalog book {orm_model.id}: {book.title!r}")
        return self.mapper.to_domain(orm_model)
