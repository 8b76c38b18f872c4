"""Tests for LibraryEntry entity."""

from datetime import UTC, datetime, timedelta

from quotebook.domain.common.value_objects.ids import BookId, LibraryEntryId, UserId
from quotebook.domain.library.entities.library_entry import LibraryEntry, ReadingStatus


def _entry() -> LibraryEntry:
    return LibraryEntry.create(UserId(1), BookId(7))


class TestLibraryEntry:
    def test_create_starts_reading_and_not_favorite(self) -> None:
        entry = _entry()

        assert entry.reading_status == ReadingStatus.READING
        assert entry.is_favorite is False
        assert entry.end_date is None
        assert entry.created_at == entry.updated_at
        assert isinstance(entry.id, LibraryEntryId)

    def test_ids_are_random(self) -> None:
        assert _entry().id != _entry().id

    def test_toggle_reading_status_completes_with_end_date(self) -> None:
        entry = _entry()

        entry.toggle_reading_status()

        assert entry.reading_status == ReadingStatus.COMPLETED
        assert entry.is_completed()
        assert entry.end_date == datetime.now(UTC).date()

    def test_toggle_reading_status_twice_restores_state(self) -> None:
        entry = _entry()

        entry.toggle_reading_status()
        entry.toggle_reading_status()

        assert entry.reading_status == ReadingStatus.READING
        assert entry.end_date is None

    def test_toggle_favorite_twice_restores_flag(self) -> None:
        entry = _entry()

        entry.toggle_favorite()
        assert entry.is_favorite is True
        entry.toggle_favorite()
        assert entry.is_favorite is False

    def test_mutations_touch_updated_at(self) -> None:
        entry = _entry()
        stale = entry.updated_at - timedelta(days=1)
        entry.updated_at = stale

        entry.toggle_favorite()

        assert entry.updated_at > stale

    def test_start_date_is_creation_day(self) -> None:
        created = datetime(2024, 5, 17, 23, 30, tzinfo=UTC)
        entry = LibraryEntry.create_with_id(
            id=LibraryEntryId.generate(),
            user_id=UserId(1),
            book_id=BookId(2),
            reading_status=ReadingStatus.READING,
            is_favorite=False,
            created_at=created,
            updated_at=created,
        )

        assert entry.start_date == created.date()
