"""
Staff Drawing - ASCII Treble Staff for the Note Reading Drill

Draws a five-line treble staff with one note head on it. Notes run from
middle C (on a ledger line below the staff) up to the B on the middle line:

    ----------------------      F
                                E
    ----------------------      D
                                C
    ----------O-----------      B   ← render_staff("B")
                                A
    ----------------------      G
                                F
    ----------------------      E
                                D
            --O--               C   ← render_staff("C")
"""

from typing import Dict, List, Union

from theory_drill.rules.notes import Note


# =============================================================================
# CONSTANTS
# =============================================================================

STAFF_WIDTH = 22
HEAD_COLUMN = 10
NOTE_HEAD = "O"

# Steps above middle C; even steps from 2 to 10 sit on a staff line
STAFF_STEPS: Dict[Note, int] = {
    Note.C: 0,
    Note.D: 1,
    Note.E: 2,
    Note.F: 3,
    Note.G: 4,
    Note.A: 5,
    Note.B: 6,
}

TOP_LINE_STEP = 10
BOTTOM_LINE_STEP = 2


# =============================================================================
# DRAWING
# =============================================================================

def _is_staff_line(step: int) -> bool:
    return BOTTOM_LINE_STEP <= step <= TOP_LINE_STEP and step % 2 == 0


def _draw_row(step: int, head_step: int) -> str:
    has_head = step == head_step

    if _is_staff_line(step):
        row = ["-"] * STAFF_WIDTH
    elif step == 0 and has_head:
        # Ledger line for middle C
        row = [" "] * STAFF_WIDTH
        for col in range(HEAD_COLUMN - 2, HEAD_COLUMN + 3):
            row[col] = "-"
    else:
        row = [" "] * STAFF_WIDTH

    if has_head:
        row[HEAD_COLUMN] = NOTE_HEAD
    return "".join(row).rstrip()


def render_staff(note: Union[Note, str]) -> str:
    """
    Draw a note on the treble staff.

    Args:
        note: A Note or its letter ("A".."G")

    Returns:
        Multi-line ASCII drawing, top line first

    Raises:
        ValueError: If the letter is not a note
    """
    if not isinstance(note, Note):
        parsed = Note.from_symbol(note)
        if parsed is None:
            raise ValueError(f"Unknown note: '{note}'. Valid notes are: {[n.symbol for n in Note]}")
        note = parsed

    head_step = STAFF_STEPS[note]

    rows: List[str] = []
    for step in range(TOP_LINE_STEP, -1, -1):
        rows.append(_draw_row(step, head_step))
    return "\n".join(rows)
