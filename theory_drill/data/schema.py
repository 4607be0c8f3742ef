"""
Schema definitions for Theory Drill quizzes.

This module defines the Pydantic models that carry one question from the
generator that built it to the grading step that consumes it:
    - Quiz: prompt + expected answer + (once read) the submitted answer
    - ScaleQuiz: a Quiz whose answer is the 7 degrees of a major scale
    - ChordFilter: the chord functions a chord quiz may ask about

Lifecycle misuse raises the errors from theory_drill.errors.
"""

from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from theory_drill.errors import (
    AnswerAlreadySubmittedError,
    AnswerMissingError,
    EmptyFilterError,
)
from theory_drill.rules.grading import DegreeVerdict, answers_match, grade_scale_dictation
from theory_drill.rules.harmony import DEGREE_COUNT, ChordFunction


# =============================================================================
# VALID OPTIONS
# =============================================================================

class QuizKind(str, Enum):
    SHEET_NOTE = "sheet_note"
    SCALE = "scale"
    ITALIAN_NAME = "italian_name"
    CHORD_FUNCTION = "chord_function"


# =============================================================================
# MAIN SCHEMA
# =============================================================================

class Quiz(BaseModel):
    """
    A single question and its answer oracle.

    The expected answer is fixed when the generator builds the quiz. The
    submitted answer stays None until the input step provides it, and can
    only be set once.

    Attributes:
        kind: Which drill produced the quiz
        prompt: Question text shown to the user
        subject: The sampled symbol the question is about (note, key, ...)
        scale: Tonic of the major key, for scale and chord quizzes
        expected_answer: The correct answer
        submitted_answer: What the user typed, None until submitted

    Example:
        >>> quiz = Quiz(
        ...     kind="italian_name",
        ...     prompt="what is the italian name for: C",
        ...     subject="C",
        ...     expected_answer="Do",
        ... )
        >>> quiz.submit(" do ")
        >>> quiz.check_answer()
        True
    """

    kind: QuizKind = Field(
        ...,
        description="Which drill produced the quiz",
    )

    prompt: str = Field(
        ...,
        min_length=1,
        description="Question text shown to the user",
        examples=["what is the italian name for: C"],
    )

    subject: str = Field(
        ...,
        min_length=1,
        description="The sampled symbol the question is about",
        examples=["C", "F", "II of B"],
    )

    scale: Optional[str] = Field(
        default=None,
        description="Tonic of the major key the question is set in, if any",
        examples=["B", "F"],
    )

    expected_answer: str = Field(
        ...,
        min_length=1,
        description="The correct answer",
        examples=["Do", "C#m7"],
    )

    submitted_answer: Optional[str] = Field(
        default=None,
        description="What the user typed, None until submitted",
    )

    def submit(self, answer: str) -> None:
        """Record the user's answer. A quiz takes exactly one answer."""
        if self.submitted_answer is not None:
            raise AnswerAlreadySubmittedError(
                f"Quiz already answered with '{self.submitted_answer}'"
            )
        self.submitted_answer = answer

    def check_answer(self) -> bool:
        """Compare the submitted answer with the expected one."""
        if self.submitted_answer is None:
            raise AnswerMissingError("user answer doesn't exist")
        return answers_match(self.expected_answer, self.submitted_answer)


class ScaleQuiz(Quiz):
    """
    A Quiz answered one degree at a time.

    `degrees` holds the 7 spellings in order; `expected_answer` is their
    space-joined form, used for display.
    """

    degrees: List[str] = Field(
        ...,
        description="Expected spelling of each scale degree, tonic first",
        examples=[["C", "D", "E", "F", "G", "A", "B"]],
    )

    @field_validator('degrees')
    @classmethod
    def validate_degrees(cls, v: List[str]) -> List[str]:
        """Ensure a full 7-note scale"""
        if len(v) != DEGREE_COUNT:
            raise ValueError(
                f"A scale needs exactly {DEGREE_COUNT} degrees. Got: {len(v)}"
            )
        return v

    def grade(self, answers: Iterable[Optional[str]]) -> Iterator[DegreeVerdict]:
        """Grade degree by degree, stopping at the first wrong answer."""
        return grade_scale_dictation(self.degrees, answers)

    def check_answer(self) -> bool:
        """Compare a whole scale typed on one line ("c d e f g a b")."""
        if self.submitted_answer is None:
            raise AnswerMissingError("user answer doesn't exist")
        submitted = self.submitted_answer.split()
        if len(submitted) != len(self.degrees):
            return False
        return all(answers_match(e, s) for e, s in zip(self.degrees, submitted))


class ChordFilter(BaseModel):
    """
    The chord functions a chord-function quiz is allowed to ask about.

    Frozen, so one filter can be shared by every session.
    """

    model_config = ConfigDict(frozen=True)

    functions: FrozenSet[ChordFunction] = Field(
        default_factory=lambda: frozenset(ChordFunction),
        description="Allowed chord functions",
    )

    @field_validator('functions')
    @classmethod
    def validate_functions(cls, v: FrozenSet[ChordFunction]) -> FrozenSet[ChordFunction]:
        """Ensure at least one function can be drawn"""
        if not v:
            raise EmptyFilterError("Chord filter must allow at least one chord function")
        return v

    @classmethod
    def from_numerals(cls, numerals: List[str]) -> "ChordFilter":
        """
        Build a filter from Roman numerals ("II", "v").

        Raises:
            ValueError: If a numeral is unknown
            EmptyFilterError: If no numeral is given
        """
        functions = set()
        for numeral in numerals:
            function = ChordFunction.from_symbol(numeral)
            if function is None:
                valid = [f.name for f in ChordFunction]
                raise ValueError(f"Unknown chord function: '{numeral}'. Valid functions are: {valid}")
            functions.add(function)
        if not functions:
            raise EmptyFilterError("Chord filter must allow at least one chord function")
        return cls(functions=functions)

    def ordered(self) -> List[ChordFunction]:
        """Allowed functions in I..VII order."""
        return sorted(self.functions, key=lambda f: f.value)
