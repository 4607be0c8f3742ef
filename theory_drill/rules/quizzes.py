"""
Quiz Generators - Randomized Questions for Each Drill

Each generator samples the domain enumerations and returns a Quiz holding
the prompt and the expected answer:
    - sheet_note_quiz:      which note is drawn on the staff?
    - scale_quiz:           spell a major scale, degree by degree
    - italian_name_quiz:    American letter → Italian name
    - chord_function_quiz:  name the seventh chord on a degree of a key

Every generator takes an `rng` with a `randrange` method (random.Random
works). Pass a seeded one to make a session reproducible.
"""

from typing import Iterable, Optional, Union
import random

from theory_drill.data.schema import ChordFilter, Quiz, QuizKind, ScaleQuiz
from theory_drill.errors import EmptyFilterError
from theory_drill.rules.harmony import ChordFunction, MajorScale, spell_chord
from theory_drill.rules.notes import Note


# =============================================================================
# SAMPLING
# =============================================================================

def draw_index(rng: Optional[random.Random] = None, count: int = 7) -> int:
    """Draw an ordinal uniformly from [0, count)."""
    if rng is None:
        rng = random.Random()
    return rng.randrange(count)


def draw_note(rng: Optional[random.Random] = None) -> Note:
    return Note(draw_index(rng, len(Note)))


def draw_scale(rng: Optional[random.Random] = None) -> MajorScale:
    return MajorScale(draw_index(rng, len(MajorScale)))


# =============================================================================
# GENERATORS
# =============================================================================

def sheet_note_quiz(rng: Optional[random.Random] = None) -> Quiz:
    """Ask for the letter of a note shown on the staff."""
    note = draw_note(rng)
    return Quiz(
        kind=QuizKind.SHEET_NOTE,
        prompt="what note is this?",
        subject=note.symbol,
        expected_answer=note.symbol,
    )


def scale_quiz(rng: Optional[random.Random] = None) -> ScaleQuiz:
    """Ask for the 7 notes of a major scale."""
    scale = draw_scale(rng)
    degrees = list(scale.degrees)
    return ScaleQuiz(
        kind=QuizKind.SCALE,
        prompt=f"what are the notes of major scale: {scale.tonic}",
        subject=scale.tonic,
        scale=scale.tonic,
        expected_answer=" ".join(degrees),
        degrees=degrees,
    )


def italian_name_quiz(
    rng: Optional[random.Random] = None,
    note: Optional[str] = None
) -> Quiz:
    """
    Ask for the Italian name of an American note letter.

    Args:
        rng: Random source, used when `note` is not given
        note: Letter to ask about ("C"); drawn at random if None

    Raises:
        ValueError: If `note` is not one of A..G
    """
    if note is None:
        chosen = draw_note(rng)
    else:
        chosen = Note.from_symbol(note)
        if chosen is None:
            valid = [n.symbol for n in Note]
            raise ValueError(f"invalid note, '{note}'. Valid notes are: {valid}")

    return Quiz(
        kind=QuizKind.ITALIAN_NAME,
        prompt=f"what is the italian name for: {chosen.symbol}",
        subject=chosen.symbol,
        expected_answer=chosen.italian,
    )


def chord_function_quiz(
    allowed: Union[ChordFilter, Iterable[Union[ChordFunction, int]], None] = None,
    rng: Optional[random.Random] = None
) -> Quiz:
    """
    Ask for the seventh chord on a degree of a major key.

    The key is drawn from all 7 major scales; the function is drawn from
    `allowed` only.

    Example:
        II of B major → "C#m7"

    Args:
        allowed: Chord functions or their ordinals (0 = I) to draw from
                 (default: all of I..VII)
        rng: Random source

    Raises:
        EmptyFilterError: If `allowed` contains no function
        ValidationError: If an ordinal is outside 0..6
    """
    if allowed is None:
        allowed = ChordFilter()
    elif not isinstance(allowed, ChordFilter):
        requested = set(allowed)
        if not requested:
            raise EmptyFilterError("Chord filter must allow at least one chord function")
        # Ordinals (0 = I) and ChordFunction members are both accepted
        allowed = ChordFilter(functions=requested)

    if rng is None:
        rng = random.Random()

    scale = draw_scale(rng)
    functions = allowed.ordered()
    function = functions[draw_index(rng, len(functions))]

    return Quiz(
        kind=QuizKind.CHORD_FUNCTION,
        prompt=f"what is the {function.name} chord of major scale: {scale.tonic}",
        subject=f"{function.name} of {scale.tonic}",
        scale=scale.tonic,
        expected_answer=spell_chord(scale, function),
    )
