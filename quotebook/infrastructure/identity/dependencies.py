"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from quotebook.exceptions import CredentialsException
from quotebook.infrastructure.identity.services.token_service import verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> int:
    """
    Get the authenticated user's id from the bearer token.

    Whether the user still exists is checked by the operations that need it.

    Raises:
        CredentialsException: If the token is missing or invalid
    """
    if credentials is None:
        raise CredentialsException

    user_id = verify_access_token(credentials.credentials)
    if user_id is None:
        raise CredentialsException
    return user_id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]
