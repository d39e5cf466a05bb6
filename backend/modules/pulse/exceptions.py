"""
Daily pulse module exceptions.
"""

from shared.exceptions import NotFoundError


class TodayCardNotFoundError(NotFoundError):
    """Raised when reacting before anyone has written today's card."""

    def __init__(self, couple_id: str, date: str):
        super().__init__(
            "No today card found",
            code="TODAY_CARD_NOT_FOUND",
            details={"couple_id": couple_id, "date": date},
        )
