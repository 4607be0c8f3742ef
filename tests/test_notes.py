"""
Tests for the note alphabet and Italian note names.

Run with: pytest tests/test_notes.py -v
"""

import pytest

from theory_drill.rules.notes import (
    ITALIAN_NAMES,
    ITALIAN_NOTES,
    NOTES,
    Note,
    get_note_index,
    to_italian,
)


class TestNoteIndex:
    """Ordinals follow the table order A=0 ... G=6."""

    @pytest.mark.parametrize("symbol,index", [
        ("A", 0), ("B", 1), ("C", 2), ("D", 3), ("E", 4), ("F", 5), ("G", 6),
    ])
    def test_known_letters(self, symbol, index):
        """Letters map to their table ordinal"""
        assert get_note_index(symbol) == index

    @pytest.mark.parametrize("symbol", ["H", "", "C#", "Do"])
    def test_unknown_letter_is_absent(self, symbol):
        """A miss returns None, never raises"""
        assert get_note_index(symbol) is None

    def test_enum_values_match_table(self):
        """Enum values index the NOTES tuple"""
        for note in Note:
            assert NOTES[note.value] == note.symbol


class TestItalianNames:
    """The Italian table stays aligned with the letters."""

    @pytest.mark.parametrize("symbol,italian", [
        ("A", "La"), ("B", "Si"), ("C", "Do"), ("D", "Re"),
        ("E", "Mi"), ("F", "Fa"), ("G", "Sol"),
    ])
    def test_to_italian(self, symbol, italian):
        """Each letter has its Italian name"""
        assert to_italian(symbol) == italian
        assert Note.from_symbol(symbol).italian == italian

    def test_unknown_letter_has_no_italian_name(self):
        """An unknown letter has no Italian name"""
        assert to_italian("H") is None

    def test_every_note_has_one_name(self):
        """Both tables have one row per note"""
        assert set(ITALIAN_NAMES) == set(Note)
        assert len(ITALIAN_NOTES) == len(NOTES) == 7

    def test_parallel_tables(self):
        """The tuple and the mapping agree"""
        for index, symbol in enumerate(NOTES):
            assert ITALIAN_NOTES[index] == ITALIAN_NAMES[Note[symbol]]


class TestNoteConversions:
    """Test Note lookups."""

    def test_from_symbol_is_lenient_about_case_and_spaces(self):
        """Lookup trims and ignores case"""
        assert Note.from_symbol(" c ") is Note.C

    def test_from_symbol_miss(self):
        """An unknown letter returns None"""
        assert Note.from_symbol("X") is None

    def test_from_index(self):
        """Ordinals outside 0..6 return None"""
        assert Note.from_index(6) is Note.G
        assert Note.from_index(7) is None
