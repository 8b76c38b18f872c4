"""Tests for Quote entity."""

from datetime import timedelta

import pytest

from quotebook.domain.common.exceptions import ValidationError
from quotebook.domain.common.value_objects.ids import LibraryEntryId
from quotebook.domain.reading.entities.quote import MAX_QUOTE_LENGTH, Quote


@pytest.fixture
def entry_id() -> LibraryEntryId:
    return LibraryEntryId.generate()


class TestQuoteCreate:
    def test_text_is_trimmed(self, entry_id: LibraryEntryId) -> None:
        quote = Quote.create(entry_id, "  Words, words, words.\n", page=12)

        assert quote.text == "Words, words, words."
        assert quote.page == 12
        assert quote.is_favorite is False
        assert quote.belongs_to(entry_id)

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_is_rejected(self, entry_id: LibraryEntryId, text: str) -> None:
        with pytest.raises(ValidationError):
            Quote.create(entry_id, text)

    def test_length_is_checked_after_trim(self, entry_id: LibraryEntryId) -> None:
        quote = Quote.create(entry_id, " " + "x" * MAX_QUOTE_LENGTH + " ")
        assert len(quote.text) == MAX_QUOTE_LENGTH

        with pytest.raises(ValidationError):
            Quote.create(entry_id, "x" * (MAX_QUOTE_LENGTH + 1))

    def test_page_must_be_positive(self, entry_id: LibraryEntryId) -> None:
        with pytest.raises(ValidationError):
            Quote.create(entry_id, "Text", page=0)


class TestQuoteMutations:
    def test_update_replaces_text_and_page(self, entry_id: LibraryEntryId) -> None:
        quote = Quote.create(entry_id, "Old", page=1)
        quote.updated_at -= timedelta(seconds=5)
        previous = quote.updated_at

        quote.update(" New ", None)

        assert quote.text == "New"
        assert quote.page is None
        assert quote.updated_at > previous

    def test_invalid_update_leaves_quote_unchanged(self, entry_id: LibraryEntryId) -> None:
        quote = Quote.create(entry_id, "Keep me", page=4)

        with pytest.raises(ValidationError):
            quote.update("   ", 5)

        assert quote.text == "Keep me"
        assert quote.page == 4

    def test_toggle_favorite_twice_restores_flag(self, entry_id: LibraryEntryId) -> None:
        quote = Quote.create(entry_id, "Text")

        quote.toggle_favorite()
        assert quote.is_favorite is True
        quote.toggle_favorite()
        assert quote.is_favorite is False

    def test_belongs_to_other_entry(self, entry_id: LibraryEntryId) -> None:
        quote = Quote.create(entry_id, "Text")

        assert not quote.belongs_to(LibraryEntryId.generate())
