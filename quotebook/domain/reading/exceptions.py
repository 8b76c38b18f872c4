"""Reading module domain exceptions."""

from quotebook.domain.common.exceptions import AuthorizationError, ValidationError


class QuoteAccessDeniedError(AuthorizationError):
    """Raised when a quote is missing or its entry belongs to another user."""

    def __init__(self, quote_id: object) -> None:
        super().__init__(f"Access denied to quote {quote_id}")
        self.quote_id = quote_id


class QuoteNotInEntryError(ValidationError):
    """Raised when a quote is addressed through an entry it does not belong to."""

    def __init__(self, quote_id: object, entry_id: object) -> None:
        super().__init__(
            "Quote does not belong to this entry", field="quote_id", value=str(quote_id)
        )
        self.quote_id = quote_id
        self.entry_id = entry_id
