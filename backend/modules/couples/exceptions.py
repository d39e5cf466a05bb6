"""
Couples module exceptions.
"""

from shared.exceptions import AuthorizationError, ConflictError, NotFoundError


class CoupleNotFoundError(NotFoundError):
    """Raised when a couple does not exist (by couple ID or member ID)."""

    def __init__(self, identifier: str):
        super().__init__(
            "No couple found",
            code="COUPLE_NOT_FOUND",
            details={"id": identifier},
        )


class NotCoupleMemberError(AuthorizationError):
    """Raised when a user acts on a couple they do not belong to."""

    def __init__(self, couple_id: str, user_id: str):
        super().__init__(
            "User is not a member of this couple",
            code="NOT_COUPLE_MEMBER",
            details={"couple_id": couple_id, "user_id": user_id},
        )


class AlreadyPairedError(ConflictError):
    """Raised when a user who already has a couple tries to join another."""

    def __init__(self, user_id: str):
        super().__init__(
            "User is already paired",
            code="ALREADY_PAIRED",
            details={"user_id": user_id},
        )


class InvalidCodeError(ConflictError):
    """Raised when a pairing code is unknown, expired or already used."""

    def __init__(self, message: str = "Invalid code", reason: str = "unknown"):
        super().__init__(
            message,
            code="INVALID_CODE",
            details={"reason": reason},
        )


class SelfJoinError(ConflictError):
    """Raised when the issuer tries to redeem their own code."""

    def __init__(self):
        super().__init__("Cannot join your own code", code="SELF_JOIN")
