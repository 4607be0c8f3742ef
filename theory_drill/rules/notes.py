"""
Notes Module - Letter Names and Their Italian Equivalents

This module holds the 7-letter note alphabet used by every drill:
    1. The Note enum (A..G), one member per table row
    2. The Italian solfège names (La, Si, Do, ...)
    3. Symbol lookups that return None instead of failing

Ordinals follow the table order A=0 ... G=6. They are lookup positions,
not pitch comparisons.
"""

from enum import Enum
from types import MappingProxyType
from typing import Optional


# =============================================================================
# THE NOTE ALPHABET
# =============================================================================

class Note(Enum):
    """One of the 7 natural note letters."""
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6

    @property
    def symbol(self) -> str:
        return self.name

    @property
    def italian(self) -> str:
        return ITALIAN_NAMES[self]

    @classmethod
    def from_index(cls, index: int) -> Optional["Note"]:
        """Get a note by its ordinal, or None if out of range."""
        try:
            return cls(index)
        except ValueError:
            return None

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["Note"]:
        """Get a note by its letter ("C", " c "), or None if unknown."""
        return cls.__members__.get(symbol.strip().upper())


NOTES = tuple(note.symbol for note in Note)

ITALIAN_NAMES = MappingProxyType({
    Note.A: "La",
    Note.B: "Si",
    Note.C: "Do",
    Note.D: "Re",
    Note.E: "Mi",
    Note.F: "Fa",
    Note.G: "Sol",
})

# Parallel to NOTES: ITALIAN_NOTES[i] is the Italian name of NOTES[i]
ITALIAN_NOTES = tuple(ITALIAN_NAMES[note] for note in Note)


# =============================================================================
# LOOKUPS
# =============================================================================

def get_note_index(symbol: str) -> Optional[int]:
    """Get the ordinal (0-6) of a note letter. Exact match, None if unknown."""
    if symbol in NOTES:
        return NOTES.index(symbol)
    return None


def to_italian(symbol: str) -> Optional[str]:
    """Translate an American letter ("C") to its Italian name ("Do")."""
    index = get_note_index(symbol)
    if index is None:
        return None
    return ITALIAN_NOTES[index]


# =============================================================================
# TABLE CHECKS (run at import)
# =============================================================================

def _check_tables() -> None:
    missing = [note.symbol for note in Note if note not in ITALIAN_NAMES]
    if missing:
        raise ValueError(f"Notes without an Italian name: {missing}")
    if len(NOTES) != len(ITALIAN_NOTES):
        raise ValueError(
            f"Note tables out of alignment: {len(NOTES)} notes, "
            f"{len(ITALIAN_NOTES)} Italian names"
        )


_check_tables()
