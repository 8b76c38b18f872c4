"""Reading domain layer."""

from quotebook.domain.reading.entities.quote import MAX_QUOTE_LENGTH, Quote
from quotebook.domain.reading.exceptions import QuoteAccessDeniedError, QuoteNotInEntryError

__all__ = [
    "MAX_QUOTE_LENGTH",
    "Quote",
    "QuoteAccessDeniedError",
    "QuoteNotInEntryError",
]
