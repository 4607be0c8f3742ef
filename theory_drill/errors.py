"""
Errors raised by the quiz engine.

Lookup misses are not errors: table lookups return None. These exceptions
mark misuse of the quiz lifecycle or an unsatisfiable request.
"""


class AnswerMissingError(RuntimeError):
    """Grading was requested before an answer was submitted."""


class AnswerAlreadySubmittedError(RuntimeError):
    """A quiz received a second answer."""


class EmptyFilterError(ValueError):
    """A chord filter allows no chord function, so no quiz can be drawn."""
