"""
Users module exceptions.
"""

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class UserNotFoundError(NotFoundError):
    """Raised when a user ID or username does not exist."""

    def __init__(self, identifier: str):
        super().__init__(
            f"User not found: {identifier}",
            code="USER_NOT_FOUND",
            details={"user": identifier},
        )


class UsernameTakenError(ConflictError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str):
        super().__init__(
            "Username already taken",
            code="USERNAME_TAKEN",
            details={"username": username},
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised when username and password do not match a user."""

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class WeakPasswordError(ValidationError):
    """Raised when a password is shorter than the configured minimum."""

    def __init__(self, min_length: int):
        super().__init__(
            f"Password must be at least {min_length} characters",
            code="WEAK_PASSWORD",
            details={"min_length": min_length},
        )
