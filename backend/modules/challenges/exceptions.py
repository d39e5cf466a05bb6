"""
Challenges module exceptions.
"""

from shared.exceptions import ValidationError


class EmptyAnswerError(ValidationError):
    """Raised when a daily question is answered with blank text."""

    def __init__(self):
        super().__init__("Answer is required", code="EMPTY_ANSWER")
