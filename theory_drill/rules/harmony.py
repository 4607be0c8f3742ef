"""
Harmony Module - Major Scales and Diatonic Seventh Chords

This module encodes the music theory behind the scale and chord drills:
    1. The spelling of the 7 natural-root major scales
    2. The Roman-numeral chord functions (I..VII)
    3. The quality of the seventh chord built on each degree
    4. Spelling a chord from a key and a function (II of B major = C#m7)

Scale spellings keep their accidentals ("C#", "Bb"), so degrees are plain
strings rather than Note members.
"""

from enum import Enum
from types import MappingProxyType
from typing import List, Optional, Tuple


# =============================================================================
# ENUMERATIONS
# =============================================================================

class MajorScale(Enum):
    """The 7 major keys built on a natural root."""
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6

    @property
    def tonic(self) -> str:
        return self.name

    @property
    def degrees(self) -> Tuple[str, ...]:
        return MAJOR_SCALES[self]

    @classmethod
    def from_index(cls, index: int) -> Optional["MajorScale"]:
        try:
            return cls(index)
        except ValueError:
            return None

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["MajorScale"]:
        return cls.__members__.get(symbol.strip().upper())


class ChordFunction(Enum):
    """Roman-numeral scale degree, zero-indexed into the scale spelling."""
    I = 0
    II = 1
    III = 2
    IV = 3
    V = 4
    VI = 5
    VII = 6

    @property
    def quality(self) -> str:
        return CHORD_QUALITIES[self]

    @classmethod
    def from_index(cls, index: int) -> Optional["ChordFunction"]:
        try:
            return cls(index)
        except ValueError:
            return None

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["ChordFunction"]:
        """Parse a Roman numeral ("ii", "V"), or None if unknown."""
        return cls.__members__.get(symbol.strip().upper())


# =============================================================================
# CONSTANTS: Scale Spellings and Chord Qualities
# =============================================================================

MAJOR_SCALES = MappingProxyType({
    MajorScale.A: ("A", "B", "C#", "D", "E", "F#", "G#"),
    MajorScale.B: ("B", "C#", "D#", "E", "F#", "G#", "A#"),
    MajorScale.C: ("C", "D", "E", "F", "G", "A", "B"),
    MajorScale.D: ("D", "E", "F#", "G", "A", "B", "C#"),
    MajorScale.E: ("E", "F#", "G#", "A", "B", "C#", "D#"),
    MajorScale.F: ("F", "G", "A", "Bb", "C", "D", "E"),
    MajorScale.G: ("G", "A", "B", "C", "D", "E", "F#"),
})

# Harmonizing the major scale in sevenths
CHORD_QUALITIES = MappingProxyType({
    ChordFunction.I: "maj7",
    ChordFunction.II: "m7",
    ChordFunction.III: "m7",
    ChordFunction.IV: "maj7",
    ChordFunction.V: "7",
    ChordFunction.VI: "m7",
    ChordFunction.VII: "m7b5",
})

DEGREE_COUNT = 7


# =============================================================================
# CORE FUNCTIONS
# =============================================================================

def get_major_scale(symbol: str) -> Optional[Tuple[str, ...]]:
    """Get the degree spellings of a major scale by its tonic letter."""
    scale = MajorScale.from_symbol(symbol)
    if scale is None:
        return None
    return scale.degrees


def spell_chord(scale: MajorScale, function: ChordFunction) -> str:
    """
    Spell the diatonic seventh chord on a scale degree.

    Examples:
        spell_chord(MajorScale.C, ChordFunction.I)   → "Cmaj7"
        spell_chord(MajorScale.B, ChordFunction.II)  → "C#m7"
        spell_chord(MajorScale.F, ChordFunction.VII) → "Em7b5"
    """
    root = scale.degrees[function.value]
    return root + function.quality


def get_diatonic_sevenths(scale: MajorScale) -> List[str]:
    """Get all 7 diatonic seventh chords of a major key, I to VII."""
    return [spell_chord(scale, function) for function in ChordFunction]


# =============================================================================
# TABLE CHECKS (run at import)
# =============================================================================

def _check_tables() -> None:
    for scale in MajorScale:
        if scale not in MAJOR_SCALES:
            raise ValueError(f"No spelling for {scale.tonic} major")
        degrees = MAJOR_SCALES[scale]
        if len(degrees) != DEGREE_COUNT:
            raise ValueError(
                f"{scale.tonic} major must have {DEGREE_COUNT} degrees. "
                f"Got: {len(degrees)}"
            )
        if degrees[0] != scale.tonic:
            raise ValueError(
                f"{scale.tonic} major must start on its tonic. Got: '{degrees[0]}'"
            )

    missing = [function.name for function in ChordFunction if function not in CHORD_QUALITIES]
    if missing:
        raise ValueError(f"Chord functions without a quality: {missing}")


_check_tables()
