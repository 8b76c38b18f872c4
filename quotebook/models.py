"""Database models."""

import uuid
from datetime import UTC, date, datetime

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quotebook.database import Base
from quotebook.domain.library.entities.book import (
    AUTHOR_MAX_LENGTH,
    COVER_URL_MAX_LENGTH,
    ISBN_MAX_LENGTH,
    PUBLISHER_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class User(Base):
    """Account that owns library entries. Provisioned outside this service."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )

    user_books: Mapped[list["UserBook"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email='{self.email}')>"


class Book(Base):
    """Canonical catalog record shared by every reader who adds the book."""

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    authors: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    # First entry of `authors` ("" when there are none); part of the dedup key
    author: Mapped[str] = mapped_column(String(AUTHOR_MAX_LENGTH), nullable=False, default="")
    translators: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    publisher: Mapped[str | None] = mapped_column(String(PUBLISHER_MAX_LENGTH), nullable=True)
    isbn: Mapped[str | None] = mapped_column(
        String(ISBN_MAX_LENGTH), nullable=True, unique=True
    )
    synopsis: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_url: Mapped[str | None] = mapped_column(String(COVER_URL_MAX_LENGTH), nullable=True)
    published_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )

    __table_args__ = (
        UniqueConstraint("title", "author", "publisher", name="uq_book_title_author_publisher"),
    )

    def __repr__(self) -> str:
        """String representation of Book."""
        return f"<Book(id={self.id}, title='{self.title}', isbn={self.isbn})>"


class UserBook(Base):
    """A user's library entry for one catalog book."""

    __tablename__ = "user_books"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    book_id: Mapped[int] = mapped_column(ForeignKey("books.id"), nullable=False)
    reading_status: Mapped[str] = mapped_column(String(20), nullable=False, default="READING")
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )

    user: Mapped[User] = relationship(back_populates="user_books")
    book: Mapped[Book] = relationship()
    quotes: Mapped[list["Quote"]] = relationship(
        back_populates="user_book", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        UniqueConstraint("user_id", "book_id", name="uq_user_book_user_book"),
        Index("ix_user_books_user_updated", "user_id", "updated_at"),
    )

    def __repr__(self) -> str:
        """String representation of UserBook."""
        return f"<UserBook(id={self.id}, user_id={self.user_id}, book_id={self.book_id})>"


class Quote(Base):
    """A passage highlighted by the reader inside one library entry."""

    __tablename__ = "quotes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    user_book_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("user_books.id", ondelete="CASCADE"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    page: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )

    user_book: Mapped[UserBook] = relationship(back_populates="quotes")

    def __repr__(self) -> str:
        """String representation of Quote."""
        return f"<Quote(id={self.id}, text='{self.text[:50]}...')>"
