"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations over one shared
key-value store.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from shared.kv_store import IKeyValueStore
    from modules.users.interfaces import IUserService
    from modules.couples.interfaces import ICoupleService
    from modules.pulse.interfaces import IPulseService
    from modules.notifications.interfaces import INotificationService
    from modules.notifications.push import IPushSender
    from modules.shark_mode.interfaces import ISharkModeService
    from modules.challenges.interfaces import (
        IDailyChallengeService,
        IWeeklyChallengeService,
    )


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self, store: "IKeyValueStore | None" = None) -> None:
        self._store = store
        self._users: "IUserService | None" = None
        self._couples: "ICoupleService | None" = None
        self._pulse: "IPulseService | None" = None
        self._push: "IPushSender | None" = None
        self._notifications: "INotificationService | None" = None
        self._shark_mode: "ISharkModeService | None" = None
        self._weekly: "IWeeklyChallengeService | None" = None
        self._daily: "IDailyChallengeService | None" = None

    @property
    def store(self) -> "IKeyValueStore":
        """Get the key-value store selected by settings."""
        if self._store is None:
            from shared.database import create_kv_store
            self._store = create_kv_store()
        return self._store

    @property
    def users(self) -> "IUserService":
        if self._users is None:
            from modules.users.service import UserService
            self._users = UserService(self.store)
        return self._users

    @property
    def couples(self) -> "ICoupleService":
        if self._couples is None:
            from modules.couples.service import CoupleService
            self._couples = CoupleService(self.store, users=self.users)
        return self._couples

    @property
    def pulse(self) -> "IPulseService":
        if self._pulse is None:
            from modules.pulse.service import PulseService
            self._pulse = PulseService(self.store, couples=self.couples)
        return self._pulse

    @property
    def push(self) -> "IPushSender":
        if self._push is None:
            from modules.notifications.push import WebPushSender
            self._push = WebPushSender(self.store)
        return self._push

    @property
    def notifications(self) -> "INotificationService":
        if self._notifications is None:
            from modules.notifications.service import NotificationService
            self._notifications = NotificationService(
                self.store,
                couples=self.couples,
                users=self.users,
                push=self.push,
            )
        return self._notifications

    @property
    def shark_mode(self) -> "ISharkModeService":
        if self._shark_mode is None:
            from modules.shark_mode.service import SharkModeService
            self._shark_mode = SharkModeService(self.store, couples=self.couples)
        return self._shark_mode

    @property
    def weekly_challenges(self) -> "IWeeklyChallengeService":
        if self._weekly is None:
            from modules.challenges.service import WeeklyChallengeService
            self._weekly = WeeklyChallengeService(self.store, couples=self.couples)
        return self._weekly

    @property
    def daily_challenges(self) -> "IDailyChallengeService":
        if self._daily is None:
            from modules.challenges.service import DailyChallengeService
            self._daily = DailyChallengeService(self.store, couples=self.couples)
        return self._daily

    def reset(self) -> None:
        """
        Reset all cached services.

        The store itself is kept so data survives a service reset.
        """
        self._users = None
        self._couples = None
        self._pulse = None
        self._push = None
        self._notifications = None
        self._shark_mode = None
        self._weekly = None
        self._daily = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_user_service() -> "IUserService":
    """FastAPI dependency for the user service."""
    return get_container().users


def get_couple_service() -> "ICoupleService":
    """FastAPI dependency for the pairing and couple service."""
    return get_container().couples


def get_pulse_service() -> "IPulseService":
    """FastAPI dependency for the today card service."""
    return get_container().pulse


def get_notification_service() -> "INotificationService":
    """FastAPI dependency for the notification service."""
    return get_container().notifications


def get_push_sender() -> "IPushSender":
    """FastAPI dependency for push subscription management."""
    return get_container().push


def get_shark_mode_service() -> "ISharkModeService":
    """FastAPI dependency for the shark mode service."""
    return get_container().shark_mode


def get_weekly_challenge_service() -> "IWeeklyChallengeService":
    """FastAPI dependency for the weekly challenge service."""
    return get_container().weekly_challenges


def get_daily_challenge_service() -> "IDailyChallengeService":
    """FastAPI dependency for the daily question service."""
    return get_container().daily_challenges
