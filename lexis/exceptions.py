"""Exceptions raised by lexis."""


class LexisError(Exception):
    """Base class for lexis errors."""


class InvalidGradeError(LexisError, ValueError):
    """Raised when a review grade is not one of LEARNED, FORGOT, HARD, EASY."""

    def __init__(self, grade):
        self.grade = grade
        super().__init__(f"Invalid review grade: {grade!r}")
