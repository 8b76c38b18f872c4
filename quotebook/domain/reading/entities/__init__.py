"""Reading domain entities."""

from .quote import MAX_QUOTE_LENGTH, Quote

__all__ = ["MAX_QUOTE_LENGTH", "Quote"]
