"""API routes for quotes."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from quotebook.application.reading.use_cases.quote_ledger_use_case import QuoteLedgerUseCase
from quotebook.config import get_settings
from quotebook.core import container
from quotebook.domain.common.exceptions import DomainError
from quotebook.exceptions import QuotebookError
from quotebook.infrastructure.common.di import inject_use_case
from quotebook.infrastructure.identity.dependencies import CurrentUserId
from quotebook.infrastructure.reading.schemas import (
    QuoteCreateRequest,
    QuoteResponse,
    QuoteUpdateRequest,
    to_quote_response,
)

logger = logging.getLogger(__name__)

# Quotes addressed through their library entry
router = APIRouter(prefix="/books/{entry_id}/quotes", tags=["quotes"])

# Quotes across the whole library
library_quotes_router = APIRouter(prefix="/quotes", tags=["quotes"])

UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
def add_quote(
    entry_id: UUID,
    request: QuoteCreateRequest,
    user_id: CurrentUserId,
    use_case: QuoteLedgerUseCase = Depends(inject_use_case(container.quote_ledger_use_case)),
) -> QuoteResponse:
    """
    Add a quote to a book in the library.

    Args:
        entry_id: ID of the library entry
        request: Quote text and optional page

    Returns:
        Created quote
    """
    try:
        quote = use_case.add_quote(user_id, entry_id, request.text, request.page)
        return to_quote_response(quote)
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to add quote to entry {entry_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get("", response_model=list[QuoteResponse], status_code=status.HTTP_200_OK)
def list_quotes(
    entry_id: UUID,
    user_id: CurrentUserId,
    favorite: Annotated[bool | None, Query(description="Only favorite quotes")] = None,
    use_case: QuoteLedgerUseCase = Depends(inject_use_case(container.quote_ledger_use_case)),
) -> list[QuoteResponse]:
    """List the quotes of a library entry, oldest first."""
    try:
        quotes = use_case.list_quotes(user_id, entry_id, favorite_only=bool(favorite))
        return [to_quote_response(quote) for quote in quotes]
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list quotes of entry {entry_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get("/{quote_id}", response_model=QuoteResponse, status_code=status.HTTP_200_OK)
def get_quote(
    entry_id: UUID,
    quote_id: UUID,
    user_id: CurrentUserId,
    use_case: QuoteLedgerUseCase = Depends(inject_use_case(container.quote_ledger_use_case)),
) -> QuoteResponse:
    try:
        return to_quote_response(use_case.get_quote(user_id, entry_id, quote_id))
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get quote {quote_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.put("/{quote_id}", response_model=QuoteResponse, status_code=status.HTTP_200_OK)
def update_quote(
    entry_id: UUID,
    quote_id: UUID,
    request: QuoteUpdateRequest,
    user_id: CurrentUserId,
    use_case: QuoteLedgerUseCase = Depends(inject_use_case(container.quote_ledger_use_case)),
) -> QuoteResponse:
    """Replace the text and page of a quote."""
    try:
        quote = use_case.update_quote(user_id, entry_id, quote_id, request.text, request.page)
        return to_quote_response(quote)
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update quote {quote_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.delete("/{quote_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quote(
    entry_id: UUID,
    quote_id: UUID,
    user_id: CurrentUserId,
    use_case: QuoteLedgerUseCase = Depends(inject_use_case(container.quote_ledger_use_case)),
) -> None:
    try:
        use_case.delete_quote(user_id, entry_id, quote_id)
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete quote {quote_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.patch(
    "/{quote_id}/favorite", response_model=QuoteResponse, status_code=status.HTTP_200_OK
)
def toggle_quote_favorite(
    entry_id: UUID,
    quote_id: UUID,
    user_id: CurrentUserId,
    use_case: QuoteLedgerUseCase = Depends(inject_use_case(container.quote_ledger_use_case)),
) -> QuoteResponse:
    try:
        return to_quote_response(use_case.toggle_favorite(user_id, entry_id, quote_id))
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to toggle favorite of quote {quote_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@library_quotes_router.get("", response_model=list[QuoteResponse], status_code=status.HTTP_200_OK)
def list_all_quotes(
    user_id: CurrentUserId,
    favorite: Annotated[bool | None, Query(description="Only favorite quotes")] = None,
    use_case: QuoteLedgerUseCase = Depends(inject_use_case(container.quote_ledger_use_case)),
) -> list[QuoteResponse]:
    """List every quote in the user's library, oldest first."""
    try:
        quotes = use_case.list_all_quotes(user_id, favorite_only=bool(favorite))
        return [to_quote_response(quote) for quote in quotes]
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list quotes for user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@library_quotes_router.get(
    "/recent", response_model=list[QuoteResponse], status_code=status.HTTP_200_OK
)
def get_recent_quotes(
    user_id: CurrentUserId,
    limit: Annotated[int | None, Query(ge=1, le=100, description="Number of quotes")] = None,
    use_case: QuoteLedgerUseCase = Depends(inject_use_case(container.quote_ledger_use_case)),
) -> list[QuoteResponse]:
    """Get the most recently created quotes across the user's library."""
    if limit is None:
        limit = get_settings().RECENT_QUOTES_LIMIT

    try:
        quotes = use_case.get_recent_quotes(user_id, limit)
        return [to_quote_response(quote) for quote in quotes]
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get recent quotes for user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e
