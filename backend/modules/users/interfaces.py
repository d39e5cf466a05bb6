"""
Users module interface.

Other modules should depend on IUserService, not the concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import PublicUser, User


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for account operations.

    Identity is a username/password pair; there is no session token.
    Callers pass the returned user ID on every later request.
    """

    async def create_user(
        self,
        username: str,
        password: str,
        display_name: str,
    ) -> PublicUser:
        """
        Register a new user.

        Raises:
            ValidationError: If a field is empty or the password is too short
            UsernameTakenError: If the username already exists
        """
        ...

    async def login(self, username: str, password: str) -> PublicUser:
        """
        Check credentials and return the matching user.

        Raises:
            InvalidCredentialsError: If no user matches
        """
        ...

    async def reset_password(self, username: str, new_password: str) -> None:
        """
        Overwrite a user's password.

        No proof of the previous password is required.

        Raises:
            UserNotFoundError: If the username is unknown
            WeakPasswordError: If the new password is too short
        """
        ...

    async def get_user(self, user_id: str) -> Optional[User]:
        """Get a stored user by ID, or None."""
        ...

    async def require_user(self, user_id: str) -> User:
        """
        Get a stored user by ID.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...
