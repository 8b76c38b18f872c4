"""Application errors that carry their own HTTP status."""

from fastapi import HTTPException
from starlette import status


class QuotebookError(Exception):
    """Base for errors raised outside the domain model."""

    def __init__(
        self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(QuotebookError):
    """A request parameter is outside the accepted range."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)


class ServiceError(QuotebookError):
    """An operation failed for reasons the caller cannot fix."""


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
