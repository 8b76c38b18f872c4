"""Signed bearer tokens identifying the acting user."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError

from quotebook.config import get_settings

ALGORITHM = "HS256"
ACCESS_TOKEN_TYPE = "access"


def create_access_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    """
    Issue an access token whose subject is the user id.

    Accounts are managed outside this service; the issuer is kept here for
    operators and tests.
    """
    settings = get_settings()
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {
        "sub": str(user_id),
        "type": ACCESS_TOKEN_TYPE,
        "exp": datetime.now(UTC) + lifetime,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> int | None:
    """Return the user id carried by a valid access token, None for anything else."""
    try:
        claims = jwt.decode(token, get_settings().SECRET_KEY, algorithms=[ALGORITHM])
    except InvalidTokenError:
        return None

    if claims.get("type") != ACCESS_TOKEN_TYPE:
        return None
    try:
        return int(claims["sub"])
    except (KeyError, TypeError, ValueError):
        return None
