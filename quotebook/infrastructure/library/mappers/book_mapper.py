"""Mapper for Book ORM ↔ Domain conversion."""

from quotebook.domain.common.value_objects.ids import BookId
from quotebook.domain.library.entities.book import Book
from quotebook.models import Book as BookORM
from quotebook.utils import ensure_utc


class BookMapper:
    """Mapper for Book ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BookORM) -> Book:
        """Convert ORM model to domain entity."""
        return Book.create_with_id(
            id=BookId(orm_model.id),
            title=orm_model.title,
            authors=orm_model.authors or [],
            translators=orm_model.translators or [],
            publisher=orm_model.publisher,
            isbn=orm_model.isbn,
            synopsis=orm_model.synopsis,
            cover_url=orm_model.cover_url,
            published_date=orm_model.published_date,
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: Book) -> BookORM:
        """Convert a new domain entity to an ORM model. Catalog books are never updated."""
        return BookORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            title=domain_entity.title,
            authors=list(domain_entity.authors),
            author=domain_entity.author,
            translators=list(domain_entity.translators),
            publisher=domain_entity.publisher,
            isbn=domain_entity.isbn,
            synopsis=domain_entity.synopsis,
            cover_url=domain_entity.cover_url,
            published_date=domain_entity.published_date,
            created_at=domain_entity.created_at,
        )
