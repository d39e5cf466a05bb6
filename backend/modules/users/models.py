"""
Users module data models.
"""

from datetime import datetime

from pydantic import Field

from shared.models import CamelModel


class PublicUser(CamelModel):
    """User projection safe to return to clients (no password hash)."""

    user_id: str = Field(..., description="Opaque, time-ordered user ID")
    username: str = Field(..., description="Unique login name")
    display_name: str = Field(..., description="Name shown to the partner")


class User(PublicUser):
    """Stored user record."""

    password_hash: str = Field(..., description="Hex SHA-256 of the password")
    created_at: datetime = Field(..., description="Registration time")

    def to_public(self) -> PublicUser:
        return PublicUser(
            user_id=self.user_id,
            username=self.username,
            display_name=self.display_name,
        )


class CreateUserRequest(CamelModel):
    username: str = ""
    password: str = ""
    display_name: str = ""


class LoginRequest(CamelModel):
    username: str = ""
    password: str = ""


class ResetPasswordRequest(CamelModel):
    username: str = ""
    new_password: str = ""


class UserResponse(CamelModel):
    """Wrapper returned by create and login."""

    user: PublicUser
