"""
Users service implementation.

Users are stored as ``user:{userId}`` documents. Username uniqueness and
login are checked with a full prefix scan over all users; there is no
username index at this scale.
"""

import hashlib
import logging
from typing import Optional

from shared.clock import Clock, generate_id, utc_now
from shared.config import get_settings
from shared.exceptions import ValidationError
from shared.kv_store import IKeyValueStore

from .interfaces import IUserService
from .models import PublicUser, User
from .exceptions import (
    InvalidCredentialsError,
    UserNotFoundError,
    UsernameTakenError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

USER_PREFIX = "user:"


def user_key(user_id: str) -> str:
    return f"{USER_PREFIX}{user_id}"


def hash_password(password: str) -> str:
    """Unsalted hex SHA-256 of the password."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


class UserService(IUserService):
    """
    Account service over the key-value store.

    Note: login performs no rate limiting or lockout, and password reset
    requires no proof of ownership.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        clock: Clock = utc_now,
        min_password_length: Optional[int] = None,
    ):
        self._store = store
        self._clock = clock
        self._min_password_length = (
            min_password_length
            if min_password_length is not None
            else get_settings().min_password_length
        )

    def _all_users(self) -> list[User]:
        return [User.model_validate(doc) for doc in self._store.get_by_prefix(USER_PREFIX)]

    def _find_by_username(self, username: str) -> Optional[User]:
        for user in self._all_users():
            if user.username == username:
                return user
        return None

    def _check_password(self, password: str) -> None:
        if len(password) < self._min_password_length:
            raise WeakPasswordError(self._min_password_length)

    async def create_user(
        self,
        username: str,
        password: str,
        display_name: str,
    ) -> PublicUser:
        if not username or not password or not display_name:
            raise ValidationError(
                "Username, password, and display name are required",
                code="MISSING_FIELDS",
            )
        self._check_password(password)

        if self._find_by_username(username) is not None:
            raise UsernameTakenError(username)

        user = User(
            user_id=generate_id(),
            username=username,
            display_name=display_name,
            password_hash=hash_password(password),
            created_at=self._clock(),
        )
        self._store.set(user_key(user.user_id), user.to_document())
        logger.info("Created user %s (%s)", user.username, user.user_id)
        return user.to_public()

    async def login(self, username: str, password: str) -> PublicUser:
        if not username or not password:
            raise ValidationError(
                "Username and password are required",
                code="MISSING_FIELDS",
            )

        password_hash = hash_password(password)
        for user in self._all_users():
            if user.username == username and user.password_hash == password_hash:
                return user.to_public()
        raise InvalidCredentialsError()

    async def reset_password(self, username: str, new_password: str) -> None:
        if not username or not new_password:
            raise ValidationError(
                "Username and new password are required",
                code="MISSING_FIELDS",
            )
        self._check_password(new_password)

        user = self._find_by_username(username)
        if user is None:
            raise UserNotFoundError(username)

        updated = user.model_copy(update={"password_hash": hash_password(new_password)})
        self._store.set(user_key(user.user_id), updated.to_document())
        logger.info("Password reset for user %s", username)

    async def get_user(self, user_id: str) -> Optional[User]:
        doc = self._store.get(user_key(user_id))
        if doc is None:
            return None
        return User.model_validate(doc)

    async def require_user(self, user_id: str) -> User:
        """Get a user or raise UserNotFoundError."""
        user = await self.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
