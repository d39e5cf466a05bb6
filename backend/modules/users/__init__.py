"""
Users module.

Handles registration, login and password reset.

Public API:
- IUserService: Interface for account operations
- User / PublicUser: Stored record and client-safe projection
- Users exceptions: UserNotFoundError, UsernameTakenError, etc.
"""

from .interfaces import IUserService
from .models import User, PublicUser
from .exceptions import (
    UserNotFoundError,
    UsernameTakenError,
    InvalidCredentialsError,
    WeakPasswordError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "PublicUser",
    # Exceptions
    "UserNotFoundError",
    "UsernameTakenError",
    "InvalidCredentialsError",
    "WeakPasswordError",
]
