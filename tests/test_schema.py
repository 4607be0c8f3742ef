"""
Tests for the Quiz records and chord filters.

Run with: pytest tests/test_schema.py -v
"""

import pytest
from pydantic import ValidationError

from theory_drill.data.schema import ChordFilter, Quiz, QuizKind, ScaleQuiz
from theory_drill.errors import (
    AnswerAlreadySubmittedError,
    AnswerMissingError,
    EmptyFilterError,
)
from theory_drill.rules.harmony import ChordFunction


def make_quiz(expected="Do"):
    return Quiz(
        kind="italian_name",
        prompt="what is the italian name for: C",
        subject="C",
        expected_answer=expected,
    )


def make_scale_quiz():
    degrees = ["F", "G", "A", "Bb", "C", "D", "E"]
    return ScaleQuiz(
        kind=QuizKind.SCALE,
        prompt="what are the notes of major scale: F",
        subject="F",
        expected_answer=" ".join(degrees),
        degrees=degrees,
    )


class TestQuizLifecycle:
    """Test submit and check on one quiz."""

    def test_no_answer_until_submitted(self):
        """A new quiz has no submitted answer"""
        quiz = make_quiz()
        assert quiz.submitted_answer is None
        assert quiz.kind is QuizKind.ITALIAN_NAME

    def test_submit_and_check(self):
        """A padded lowercase answer is correct"""
        quiz = make_quiz()
        quiz.submit(" do ")
        assert quiz.check_answer() is True

    def test_wrong_answer(self):
        """A prefix answer is incorrect"""
        quiz = make_quiz()
        quiz.submit("D")
        assert quiz.check_answer() is False

    def test_check_without_answer_is_an_error(self):
        """Grading before submit raises AnswerMissingError"""
        with pytest.raises(AnswerMissingError):
            make_quiz().check_answer()

    def test_answer_is_set_once(self):
        """A second submit raises and keeps the first answer"""
        quiz = make_quiz()
        quiz.submit("Do")
        with pytest.raises(AnswerAlreadySubmittedError):
            quiz.submit("Re")
        assert quiz.submitted_answer == "Do"

    def test_unknown_kind_is_rejected(self):
        """Only the four drills are valid kinds"""
        with pytest.raises(ValidationError):
            Quiz(kind="minor_scale", prompt="?", subject="A", expected_answer="A")

    def test_empty_expected_answer_is_rejected(self):
        """An empty expected answer is invalid"""
        with pytest.raises(ValidationError):
            make_quiz(expected="")


class TestScaleQuiz:
    """Test the 7-degree scale record."""

    def test_needs_seven_degrees(self):
        """A scale quiz must have 7 degrees"""
        with pytest.raises(ValidationError):
            ScaleQuiz(
                kind=QuizKind.SCALE,
                prompt="what are the notes of major scale: C",
                subject="C",
                expected_answer="C D E",
                degrees=["C", "D", "E"],
            )

    def test_grade_degree_by_degree(self):
        """grade() skips blanks and stops at the first miss"""
        verdicts = list(make_scale_quiz().grade(["f", "", "A", "A#", "C"]))
        assert [v.correct for v in verdicts] == [True, None, True, False]

    def test_whole_scale_on_one_line(self):
        """A one-line scale is compared token by token"""
        quiz = make_scale_quiz()
        quiz.submit("f g a bb c d e")
        assert quiz.check_answer() is True

    def test_whole_scale_wrong_length(self):
        """A short scale is incorrect"""
        quiz = make_scale_quiz()
        quiz.submit("f g a")
        assert quiz.check_answer() is False

    def test_dump_includes_degrees(self):
        """model_dump carries the degrees"""
        dumped = make_scale_quiz().model_dump()
        assert dumped["degrees"][3] == "Bb"
        assert dumped["submitted_answer"] is None
        assert dumped["scale"] is None


class TestChordFilter:
    """Test building and validating chord filters."""

    def test_default_allows_everything(self):
        """The default filter allows I..VII"""
        assert ChordFilter().ordered() == list(ChordFunction)

    def test_from_numerals(self):
        """Duplicates collapse and order is I..VII"""
        chord_filter = ChordFilter.from_numerals(["V", "ii", "V"])
        assert chord_filter.ordered() == [ChordFunction.II, ChordFunction.V]

    def test_empty_numerals_rejected(self):
        """No numerals raises EmptyFilterError"""
        with pytest.raises(EmptyFilterError):
            ChordFilter.from_numerals([])

    def test_unknown_numeral_rejected(self):
        """Unknown numerals raise ValueError"""
        with pytest.raises(ValueError, match="Unknown chord function"):
            ChordFilter.from_numerals(["II", "IIX"])

    def test_empty_set_rejected(self):
        """An empty set fails validation"""
        with pytest.raises(ValidationError):
            ChordFilter(functions=set())

    def test_is_frozen(self):
        """A filter cannot be changed after construction"""
        chord_filter = ChordFilter.from_numerals(["II", "V"])
        with pytest.raises(ValidationError):
            chord_filter.functions = frozenset({ChordFunction.I})
        assert isinstance(chord_filter.functions, frozenset)
        assert chord_filter.ordered() == [ChordFunction.II, ChordFunction.V]

    def test_ordinals_are_coerced(self):
        """Ordinals 0..6 become chord functions"""
        assert ChordFilter(functions={1, 4}).ordered() == [ChordFunction.II, ChordFunction.V]
