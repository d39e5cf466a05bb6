"""
Shark mode module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class SharkModeAlreadyActiveError(ConflictError):
    """Raised when activating while the couple already has an active record."""

    def __init__(self, couple_id: str):
        super().__init__(
            "Shark mode is already active",
            code="SHARK_MODE_ACTIVE",
            details={"couple_id": couple_id},
        )


class SharkModeNotActiveError(NotFoundError):
    """Raised when an action needs an active shark mode and there is none."""

    def __init__(self, couple_id: str):
        super().__init__(
            "No active shark mode",
            code="SHARK_MODE_NOT_ACTIVE",
            details={"couple_id": couple_id},
        )


class NotActivatorError(AuthorizationError):
    """Raised when someone other than the activator changes shark mode."""

    def __init__(self, user_id: str):
        super().__init__(
            "Only the partner who activated shark mode can change it",
            code="NOT_ACTIVATOR",
            details={"user_id": user_id},
        )


class ActivatorCannotReassureError(AuthorizationError):
    """Raised when the activator tries to reassure themselves."""

    def __init__(self, user_id: str):
        super().__init__(
            "Only your partner can send reassurance",
            code="ACTIVATOR_CANNOT_REASSURE",
            details={"user_id": user_id},
        )


class InvalidDurationError(ValidationError):
    """Raised when a duration falls outside the allowed window."""

    def __init__(self, message: str, max_days: int):
        super().__init__(
            message,
            code="INVALID_DURATION",
            details={"max_days": max_days},
        )
