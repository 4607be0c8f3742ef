"""
Theory Drill - Source Package

A terminal drill tool for music theory: note reading, major scale
spelling, Italian note names and diatonic seventh chords.

Subpackages:
    - theory_drill.rules: Music theory tables, quiz generators, grading
    - theory_drill.data: Quiz records (Pydantic schemas)
    - theory_drill.app: Terminal interface and staff drawing

Example usage:
    from theory_drill.rules.quizzes import italian_name_quiz

    quiz = italian_name_quiz(note="G")
    quiz.submit("sol")
    print(quiz.check_answer())  # True
"""

__version__ = "0.1.0"
