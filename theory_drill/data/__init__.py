"""
Data Subpackage

This package holds the records passed between the quiz engine and the
terminal:
    - schema.py: Pydantic models for quizzes and chord filters

The core data structure is the Quiz, which contains:
    - prompt: The question shown to the user
    - expected_answer: The correctness oracle
    - submitted_answer: What the user typed (set once)
"""

from theory_drill.data.schema import Quiz, QuizKind, ScaleQuiz, ChordFilter
