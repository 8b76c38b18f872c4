"""Infrastructure layer repositories for reading bounded context."""

from quotebook.infrastructure.reading.repositories.quote_repository import QuoteRepository

__all__ = ["QuoteRepository"]
