"""
Test Package

Contains unit tests for all modules.
Run with: pytest tests/ -v

Test files follow the pattern:
    test_<module_name>.py

Example:
    tests/test_harmony.py     - Tests for theory_drill/rules/harmony.py
    tests/test_quizzes.py     - Tests for theory_drill/rules/quizzes.py
    tests/test_cli.py         - Tests for theory_drill/app/cli.py
"""
