"""
Base exception classes for the Aimo Pulse backend.

Each module should define its own exceptions that inherit from these bases.
The API maps each base class to one HTTP status code, so module exceptions
only need to pick the right parent.
"""

from typing import Optional, Any


class PulseError(Exception):
    """
    Base exception for all Aimo Pulse errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(PulseError):
    """Resource not found."""

    pass


class ValidationError(PulseError):
    """Input validation failed."""

    pass


class ConflictError(PulseError):
    """A uniqueness or state precondition was violated."""

    pass


class AuthenticationError(PulseError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(PulseError):
    """Authorization failed (caller may not perform this action)."""

    pass
