"""Repository for Quote domain entities."""

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from quotebook.domain.common.value_objects.ids import LibraryEntryId, QuoteId, UserId
from quotebook.domain.reading.entities.quote import Quote
from quotebook.infrastructure.reading.mappers.quote_mapper import QuoteMapper
from quotebook.models import Quote as QuoteORM
from quotebook.models import UserBook as UserBookORM


class QuoteRepository:
    """Repository for Quote domain entities. Ownership is checked through the parent entry."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = QuoteMapper()

    def find_by_id(self, quote_id: QuoteId, user_id: UserId) -> Quote | None:
        """
        Find a quote by ID with user ownership check.

        Args:
            quote_id: The quote ID
            user_id: The user ID, matched against the quote's library entry

        Returns:
            Quote entity if found and owned by user, None otherwise
        """
        stmt = (
            select(QuoteORM)
            .join(UserBookORM, QuoteORM.user_book_id == UserBookORM.id)
            .where(QuoteORM.id == quote_id.value, UserBookORM.user_id == user_id.value)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_entry(self, entry_id: LibraryEntryId, favorite_only: bool = False) -> list[Quote]:
        stmt = select(QuoteORM).where(QuoteORM.user_book_id == entry_id.value)
        if favorite_only:
            stmt = stmt.where(QuoteORM.is_favorite.is_(True))
        stmt = stmt.order_by(QuoteORM.created_at.asc())

        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_recent_by_entry(self, entry_id: LibraryEntryId, limit: int) -> list[Quote]:
        stmt = (
            select(QuoteORM)
            .where(QuoteORM.user_book_id == entry_id.value)
            .order_by(QuoteORM.created_at.desc())
            .limit(limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_user(self, user_id: UserId, favorite_only: bool = False) -> list[Quote]:
        stmt = (
            select(QuoteORM)
            .join(UserBookORM, QuoteORM.user_book_id == UserBookORM.id)
            .where(UserBookORM.user_id == user_id.value)
        )
        if favorite_only:
            stmt = stmt.where(QuoteORM.is_favorite.is_(True))
        stmt = stmt.order_by(QuoteORM.created_at.asc())

        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_recent_by_user(self, user_id: UserId, limit: int) -> list[Quote]:
        stmt = (
            select(QuoteORM)
            .join(UserBookORM, QuoteORM.user_book_id == UserBookORM.id)
            .where(UserBookORM.user_id == user_id.value)
            .order_by(QuoteORM.created_at.desc())
            .limit(limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_by_entry(self, entry_id: LibraryEntryId) -> int:
        stmt = select(func.count(QuoteORM.id)).where(QuoteORM.user_book_id == entry_id.value)
        return self.db.execute(stmt).scalar() or 0

    def count_by_entries(self, entry_ids: list[LibraryEntryId]) -> dict[LibraryEntryId, int]:
        """
        Count quotes for several entries in one query.

        Returns:
            Mapping of entry id to quote count; entries without quotes map to 0
        """
        counts = dict.fromkeys(entry_ids, 0)
        if not entry_ids:
            return counts

        stmt = (
            select(QuoteORM.user_book_id, func.count(QuoteORM.id))
            .where(QuoteORM.user_book_id.in_([entry_id.value for entry_id in entry_ids]))
            .group_by(QuoteORM.user_book_id)
        )
        for user_book_id, count in self.db.execute(stmt).all():
            counts[LibraryEntryId(user_book_id)] = count
        return counts

    def add(self, quote: Quote) -> Quote:
        orm_model = self.mapper.to_orm(quote)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def save(self, quote: Quote) -> Quote:
        """
        Persist changes to an existing quote.

        Raises:
            ValueError: If the quote does not exist
        """
        orm_model = self.db.get(QuoteORM, quote.id.value)
        if not orm_model:
            raise ValueError(f"Quote {quote.id} not found")
        self.mapper.to_orm(quote, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def delete(self, quote_id: QuoteId) -> bool:
        orm_model = self.db.get(QuoteORM, quote_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.flush()
        return True

    def delete_by_entry(self, entry_id: LibraryEntryId) -> int:
        stmt = delete(QuoteORM).where(QuoteORM.user_book_id == entry_id.value)
        result = self.db.execute(stmt)
        return result.rowcount or 0
