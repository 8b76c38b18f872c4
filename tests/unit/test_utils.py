"""Tests for shared helpers."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from quotebook.utils import ensure_utc, extract_first_isbn, parse_published_date


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("8937460440 9788937460449", "8937460440"),
        ("  9788937460449  ", "9788937460449"),
        ("9788937460449", "9788937460449"),
        ("", None),
        ("   ", None),
        (None, None),
    ],
)
def test_extract_first_isbn(raw: str | None, expected: str | None) -> None:
    assert extract_first_isbn(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2020-01-31T00:00:00.000+09:00", date(2020, 1, 31)),
        ("1974-05-01", date(1974, 5, 1)),
        ("", None),
        (None, None),
        ("sometime in 1974", None),
    ],
)
def test_parse_published_date(raw: str | None, expected: date | None) -> None:
    assert parse_published_date(raw) == expected


def test_ensure_utc_marks_naive_values() -> None:
    naive = datetime(2024, 3, 1, 12, 0)

    assert ensure_utc(naive) == datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


def test_ensure_utc_keeps_aware_values() -> None:
    aware = datetime(2024, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=9)))

    assert ensure_utc(aware) is aware
