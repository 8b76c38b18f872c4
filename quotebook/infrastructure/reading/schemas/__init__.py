"""Reading context schemas."""

from quotebook.infrastructure.reading.schemas.quote_schemas import (
    QuoteBase,
    QuoteCreateRequest,
    QuoteResponse,
    QuoteUpdateRequest,
    to_quote_response,
)

__all__ = [
    "QuoteBase",
    "QuoteCreateRequest",
    "QuoteResponse",
    "QuoteUpdateRequest",
    "to_quote_response",
]
