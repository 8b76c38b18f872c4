"""Mapper for Quote ORM ↔ Domain conversion."""

from quotebook.domain.common.value_objects.ids import LibraryEntryId, QuoteId
from quotebook.domain.reading.entities.quote import Quote
from quotebook.models import Quote as QuoteORM
from quotebook.utils import ensure_utc


class QuoteMapper:
    """Mapper for Quote ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: QuoteORM) -> Quote:
        """Convert ORM model to domain entity."""
        return Quote.create_with_id(
            id=QuoteId(orm_model.id),
            library_entry_id=LibraryEntryId(orm_model.user_book_id),
            text=orm_model.text,
            page=orm_model.page,
            is_favorite=orm_model.is_favorite,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Quote, orm_model: QuoteORM | None = None) -> QuoteORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.text = domain_entity.text
            orm_model.page = domain_entity.page
            orm_model.is_favorite = domain_entity.is_favorite
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return QuoteORM(
            id=domain_entity.id.value,
            user_book_id=domain_entity.library_entry_id.value,
            text=domain_entity.text,
            page=domain_entity.page,
            is_favorite=domain_entity.is_favorite,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
