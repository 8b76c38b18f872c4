"""Mapper for UserBook ORM ↔ LibraryEntry conversion."""

from quotebook.domain.common.value_objects.ids import BookId, LibraryEntryId, UserId
from quotebook.domain.library.entities.library_entry import LibraryEntry, ReadingStatus
from quotebook.models import UserBook as UserBookORM
from quotebook.utils import ensure_utc


class LibraryEntryMapper:
    """Mapper for UserBook ORM ↔ LibraryEntry conversion."""

    def to_domain(self, orm_model: UserBookORM) -> LibraryEntry:
        """Convert ORM model to domain entity."""
        return LibraryEntry.create_with_id(
            id=LibraryEntryId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            book_id=BookId(orm_model.book_id),
            reading_status=ReadingStatus(orm_model.reading_status),
            is_favorite=orm_model.is_favorite,
            end_date=orm_model.end_date,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
        )

    def to_orm(
        self, domain_entity: LibraryEntry, orm_model: UserBookORM | None = None
    ) -> UserBookORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; owner and book never change
            orm_model.reading_status = domain_entity.reading_status.value
            orm_model.is_favorite = domain_entity.is_favorite
            orm_model.end_date = domain_entity.end_date
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        return UserBookORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            book_id=domain_entity.book_id.value,
            reading_status=domain_entity.reading_status.value,
            is_favorite=domain_entity.is_favorite,
            end_date=domain_entity.end_date,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
