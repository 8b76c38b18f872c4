"""Pydantic schemas for Quote API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from quotebook.domain.reading.entities.quote import Quote


class QuoteBase(BaseModel):
    """Base schema for quote input. Length is checked after trimming by the domain."""

    text: str = Field(..., min_length=1, description="Quote text, at most 1000 characters")
    page: int | None = Field(None, ge=1, description="Optional page number")


class QuoteCreateRequest(QuoteBase):
    """Schema for adding a quote to a library entry."""


class QuoteUpdateRequest(QuoteBase):
    """Schema for replacing a quote's text and page."""


class QuoteResponse(BaseModel):
    """Schema for Quote response."""

    quote_id: UUID
    user_book_id: UUID
    text: str
    page: int | None
    is_favorite: bool
    created_at: datetime
    updated_at: datetime


def to_quote_response(quote: Quote) -> QuoteResponse:
    return QuoteResponse(
        quote_id=quote.id.value,
        user_book_id=quote.library_entry_id.value,
        text=quote.text,
        page=quote.page,
        is_favorite=quote.is_favorite,
        created_at=quote.created_at,
        updated_at=quote.updated_at,
    )
