"""Utility functions shared across layers."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime

logger = logging.getLogger(__name__)


def extract_first_isbn(raw: str | None) -> str | None:
    """Return the first ISBN of a catalog isbn field.

    Catalog records often carry several codes in one field separated by
    spaces (e.g. "8937460440 9788937460449"). Only the first one is
    canonical.

    Args:
        raw: Raw isbn field, possibly empty or None

    Returns:
        The first token, or None when the field holds no token
    """
    if raw is None:
        return None
    tokens = raw.strip().split()
    if not tokens:
        return None
    return tokens[0]


def parse_published_date(raw: str | None) -> date | None:
    """Parse a catalog publication date.

    Accepts "YYYY-MM-DD" and ISO timestamps ("2020-01-31T00:00:00.000+09:00"),
    which are truncated to their date part.
    """
    if raw is None or not raw.strip():
        return None
    value = raw.strip().split("T", 1)[0]
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(f"Ignoring unparseable published date: {raw!r}")
        return None


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from the database."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
