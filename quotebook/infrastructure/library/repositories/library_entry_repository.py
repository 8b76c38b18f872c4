"""Repository for LibraryEntry domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from quotebook.domain.common.value_objects.ids import BookId, LibraryEntryId, UserId
from quotebook.domain.library.entities.library_entry import LibraryEntry, ReadingStatus
from quotebook.domain.library.exceptions import LibraryEntryAlreadyExistsError
from quotebook.infrastructure.library.mappers.library_entry_mapper import LibraryEntryMapper
from quotebook.models import UserBook as UserBookORM

logger = logging.getLogger(__name__)


class LibraryEntryRepository:
    """Repository for LibraryEntry domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LibraryEntryMapper()

    def find_by_id(self, entry_id: LibraryEntryId, user_id: UserId) -> LibraryEntry | None:
        """
        Find an entry by ID with user ownership check.

        Args:
            entry_id: The entry ID
            user_id: The user ID for ownership verification

        Returns:
            LibraryEntry if found and owned by user, None otherwise
        """
        stmt = select(UserBookORM).where(
            UserBookORM.id == entry_id.value,
            UserBookORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_and_book(self, user_id: UserId, book_id: BookId) -> LibraryEntry | None:
        stmt = select(UserBookORM).where(
            UserBookORM.user_id == user_id.value,
            UserBookORM.book_id == book_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(
        self,
        user_id: UserId,
        favorite_only: bool = False,
        reading_status: ReadingStatus | None = None,
    ) -> list[LibraryEntry]:
        """
        List a user's entries.

        Args:
            user_id: The user ID
            favorite_only: Only include favorite entries
            reading_status: Only include entries in this status

        Returns:
            List of entries ordered by updated_at DESC
        """
        stmt = select(UserBookORM).where(UserBookORM.user_id == user_id.value)
        if favorite_only:
            stmt = stmt.where(UserBookORM.is_favorite.is_(True))
        if reading_status is not None:
            stmt = stmt.where(UserBookORM.reading_status == reading_status.value)
        stmt = stmt.order_by(UserBookORM.updated_at.desc())

        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_most_recent(self, user_id: UserId) -> LibraryEntry | None:
        stmt = (
            select(UserBookORM)
            .where(UserBookORM.user_id == user_id.value)
            .order_by(UserBookORM.updated_at.desc())
            .limit(1)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def add(self, entry: LibraryEntry) -> LibraryEntry:
        """
        Insert a new entry inside a savepoint.

        Raises:
            LibraryEntryAlreadyExistsError: If the user already has an entry for the book
        """
        orm_model = self.mapper.to_orm(entry)
        try:
            with self.db.begin_nested():
                self.db.add(orm_model)
        except IntegrityError as e:
            logger.info(
                f"Library entry insert conflicted: user={entry.user_id.value} "
                f"book={entry.book_id.value}"
            )
            raise LibraryEntryAlreadyExistsError(entry.user_id.value, entry.book_id.value) from e
        return self.mapper.to_domain(orm_model)

    def save(self, entry: LibraryEntry) -> LibraryEntry:
        """
        Persist changes to an existing entry.

        Raises:
            ValueError: If the entry does not exist
        """
        orm_model = self.db.get(UserBookORM, entry.id.value)
        if not orm_model:
            raise ValueError(f"Library entry {entry.id} not found")
        self.mapper.to_orm(entry, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def delete(self, entry_id: LibraryEntryId, user_id: UserId) -> bool:
        """
        Delete an entry.

        Args:
            entry_id: The entry ID
            user_id: The user ID for ownership verification

        Returns:
            True if deleted, False if not found
        """
        stmt = select(UserBookORM).where(
            UserBookORM.id == entry_id.value,
            UserBookORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.flush()
        return True
