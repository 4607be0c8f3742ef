"""
Rules Subpackage

This package contains the music theory and the quiz engine:
    - notes.py: Note alphabet and Italian note names
    - harmony.py: Major scale spellings and diatonic seventh chords
    - grading.py: Answer comparison and scale dictation grading
    - quizzes.py: Randomized quiz generators (one per drill)

Usage:
    import random
    from theory_drill.rules.quizzes import chord_function_quiz

    quiz = chord_function_quiz(rng=random.Random(7))
    print(quiz.prompt)           # e.g. 'what is the V chord of major scale: D'
    print(quiz.expected_answer)  # e.g. 'A7'

quizzes.py is not re-exported here: it depends on theory_drill.data, which
itself imports from this package.
"""

from theory_drill.rules.notes import Note, NOTES, ITALIAN_NOTES, get_note_index, to_italian
from theory_drill.rules.harmony import (
    MajorScale, ChordFunction, MAJOR_SCALES, CHORD_QUALITIES,
    get_major_scale, spell_chord, get_diatonic_sevenths,
)
from theory_drill.rules.grading import (
    DegreeVerdict, normalize_answer, answers_match, grade_scale_dictation,
)
