"""API routes for the user's library."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from quotebook.application.library.use_cases.library_entry_use_case import LibraryEntryUseCase
from quotebook.config import Settings, get_settings
from quotebook.core import container
from quotebook.domain.common.exceptions import DomainError
from quotebook.domain.library.entities.library_entry import ReadingStatus
from quotebook.exceptions import QuotebookError
from quotebook.infrastructure.common.di import inject_use_case
from quotebook.infrastructure.identity.dependencies import CurrentUserId
from quotebook.infrastructure.library.schemas import (
    AddBookRequest,
    AddBookResponse,
    LibraryEntryResponse,
    RecentBookResponse,
    to_entry_response,
)
from quotebook.infrastructure.reading.schemas import to_quote_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["library"])

UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


@router.post("", response_model=AddBookResponse, status_code=status.HTTP_201_CREATED)
def add_book_to_library(
    request: AddBookRequest,
    user_id: CurrentUserId,
    use_case: LibraryEntryUseCase = Depends(inject_use_case(container.library_entry_use_case)),
) -> AddBookResponse:
    """
    Add a catalog book to the current user's library.

    The book is matched against the shared catalog by ISBN, then by
    title, first author and publisher, and only created when neither matches.

    Raises:
        DuplicateLibraryEntryError: If the book is already in the library (409)
    """
    try:
        details = use_case.add_to_library(user_id, request.book_info.to_candidate())
        entry = to_entry_response(details)
        return AddBookResponse(**entry.model_dump(), message="Book added to your library")
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to add book for user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get("", response_model=list[LibraryEntryResponse], status_code=status.HTTP_200_OK)
def list_library(
    user_id: CurrentUserId,
    favorite: Annotated[bool | None, Query(description="Only favorite books")] = None,
    reading: Annotated[
        bool | None, Query(description="true for books being read, false for completed")
    ] = None,
    use_case: LibraryEntryUseCase = Depends(inject_use_case(container.library_entry_use_case)),
) -> list[LibraryEntryResponse]:
    """
    List the current user's library, most recently active first.

    Args:
        favorite: When true, only favorite books are returned
        reading: Filter by reading status (true: READING, false: COMPLETED)
    """
    if reading is None:
        reading_status = None
    else:
        reading_status = ReadingStatus.READING if reading else ReadingStatus.COMPLETED

    try:
        entries = use_case.list_entries(
            user_id, favorite_only=bool(favorite), reading_status=reading_status
        )
        return [to_entry_response(details) for details in entries]
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list library for user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get("/recent", response_model=RecentBookResponse, status_code=status.HTTP_200_OK)
def get_recent_book(
    user_id: CurrentUserId,
    settings: Annotated[Settings, Depends(get_settings)],
    use_case: LibraryEntryUseCase = Depends(inject_use_case(container.library_entry_use_case)),
) -> RecentBookResponse:
    """Get the most recently active book with its newest quotes."""
    try:
        activity = use_case.get_recent_with_quotes(
            user_id, quote_limit=settings.RECENT_QUOTES_LIMIT
        )
        return RecentBookResponse(
            recent_book=to_entry_response(activity.details) if activity.details else None,
            quotes=[to_quote_response(quote) for quote in activity.quotes],
        )
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get recent book for user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get("/{entry_id}", response_model=LibraryEntryResponse, status_code=status.HTTP_200_OK)
def get_library_entry(
    entry_id: UUID,
    user_id: CurrentUserId,
    use_case: LibraryEntryUseCase = Depends(inject_use_case(container.library_entry_use_case)),
) -> LibraryEntryResponse:
    try:
        return to_entry_response(use_case.get_entry(user_id, entry_id))
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get library entry {entry_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.patch(
    "/{entry_id}/complete", response_model=LibraryEntryResponse, status_code=status.HTTP_200_OK
)
def toggle_completed(
    entry_id: UUID,
    user_id: CurrentUserId,
    use_case: LibraryEntryUseCase = Depends(inject_use_case(container.library_entry_use_case)),
) -> LibraryEntryResponse:
    """
    Toggle a book between reading and completed.

    Completing sets the end date to today; resuming clears it.
    """
    try:
        return to_entry_response(use_case.toggle_reading_status(user_id, entry_id))
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to toggle reading status of {entry_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.patch(
    "/{entry_id}/favorite", response_model=LibraryEntryResponse, status_code=status.HTTP_200_OK
)
def toggle_favorite(
    entry_id: UUID,
    user_id: CurrentUserId,
    use_case: LibraryEntryUseCase = Depends(inject_use_case(container.library_entry_use_case)),
) -> LibraryEntryResponse:
    try:
        return to_entry_response(use_case.toggle_favorite(user_id, entry_id))
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to toggle favorite of {entry_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_library_entry(
    entry_id: UUID,
    user_id: CurrentUserId,
    use_case: LibraryEntryUseCase = Depends(inject_use_case(container.library_entry_use_case)),
) -> None:
    """Remove a book and all of its quotes from the library."""
    try:
        use_case.delete_entry(user_id, entry_id)
    except (QuotebookError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete library entry {entry_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e
