"""
Grading Module - Answer Comparison Rules

A submitted answer is correct when, after trimming surrounding whitespace
and lower-casing, it equals the expected answer exactly:

    "  do " vs "Do"  → correct
    "D"     vs "Do"  → incorrect (no prefix matching)

Scale dictation is graded one degree at a time by grade_scale_dictation().
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from theory_drill.errors import AnswerMissingError


# =============================================================================
# SINGLE ANSWERS
# =============================================================================

def normalize_answer(text: str) -> str:
    return text.strip().lower()


def answers_match(expected: str, submitted: str) -> bool:
    """Check a submitted answer against the expected one."""
    return normalize_answer(submitted) == normalize_answer(expected)


# =============================================================================
# SCALE DICTATION
# =============================================================================

@dataclass
class DegreeVerdict:
    """
    Outcome of one degree in a scale dictation.

    Attributes:
        degree: Degree index, 0 for the tonic
        expected: Correct spelling of the degree
        submitted: What the user typed for it
        correct: True/False, or None when the degree was skipped
    """
    degree: int
    expected: str
    submitted: str
    correct: Optional[bool]

    @property
    def skipped(self) -> bool:
        return self.correct is None


def grade_scale_dictation(
    degrees: Sequence[str],
    answers: Iterable[Optional[str]]
) -> Iterator[DegreeVerdict]:
    """
    Grade a scale dictation lazily, one answer per degree.

    Answers are pulled from `answers` only when their degree comes up, so
    a generator that prompts the user is asked exactly as many times as
    needed. A blank answer skips its degree. The first wrong answer ends
    the dictation: no later answer is pulled.

    Args:
        degrees: Expected spelling of each degree, tonic first
        answers: Submitted answers, in degree order

    Yields:
        One DegreeVerdict per degree answered

    Raises:
        AnswerMissingError: If answers run out or an answer is None
    """
    answer_iter = iter(answers)
    for index, expected in enumerate(degrees):
        submitted = next(answer_iter, None)
        if submitted is None:
            raise AnswerMissingError(f"no answer for degree {index + 1} ('{expected}')")

        if not submitted.strip():
            yield DegreeVerdict(index, expected, submitted, None)
            continue

        correct = answers_match(expected, submitted)
        yield DegreeVerdict(index, expected, submitted, correct)
        if not correct:
            return
