"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Services are wired over an in-memory key-value store and a controllable
clock; ``couple`` seeds two registered, paired users.
"""

from datetime import datetime, timedelta, timezone

import pytest

from shared.kv_store import InMemoryKeyValueStore
from modules.users.models import User
from modules.users.service import UserService, hash_password, user_key
from modules.couples.models import Couple
from modules.couples.service import CoupleService, couple_key, user_couple_key
from modules.pulse.service import PulseService
from modules.notifications.service import NotificationService
from modules.shark_mode.service import SharkModeService
from modules.challenges.service import DailyChallengeService, WeeklyChallengeService


# Wednesday of ISO week 2026-W10
START = datetime(2026, 3, 4, 12, 0, tzinfo=timezone.utc)

ALICE_ID = "1767225600000-a11ce0000000"
BOB_ID = "1767225600001-b0b000000000"
CAROL_ID = "1767225600002-ca10100000000"
COUPLE_ID = "1767225600003-c0091e000000"


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def seed_user(store, user_id: str, username: str, display_name: str, password: str = "secret1") -> User:
    user = User(
        user_id=user_id,
        username=username,
        display_name=display_name,
        password_hash=hash_password(password),
        created_at=START,
    )
    store.set(user_key(user_id), user.to_document())
    return user


def seed_couple(store, couple_id: str, user1_id: str, user2_id: str) -> Couple:
    couple = Couple(couple_id=couple_id, user1_id=user1_id, user2_id=user2_id, created_at=START)
    store.set(couple_key(couple_id), couple.to_document())
    store.set(user_couple_key(user1_id), couple_id)
    store.set(user_couple_key(user2_id), couple_id)
    return couple


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def users(store, clock) -> UserService:
    return UserService(store, clock=clock, min_password_length=6)


@pytest.fixture
def couples(store, users, clock) -> CoupleService:
    return CoupleService(store, users=users, clock=clock, code_ttl=timedelta(minutes=15))


@pytest.fixture
def pulse(store, couples, clock) -> PulseService:
    return PulseService(store, couples=couples, clock=clock)


@pytest.fixture
def notifications(store, couples, users, clock) -> NotificationService:
    return NotificationService(store, couples=couples, users=users, clock=clock)


@pytest.fixture
def shark_mode(store, couples, clock) -> SharkModeService:
    return SharkModeService(store, couples=couples, clock=clock, max_days=7)


@pytest.fixture
def weekly(store, couples, clock) -> WeeklyChallengeService:
    return WeeklyChallengeService(store, couples=couples, clock=clock)


@pytest.fixture
def daily(store, couples, clock) -> DailyChallengeService:
    return DailyChallengeService(store, couples=couples, clock=clock)


@pytest.fixture
def alice(store) -> User:
    return seed_user(store, ALICE_ID, "alice", "Alice")


@pytest.fixture
def bob(store) -> User:
    return seed_user(store, BOB_ID, "bob", "Bob")


@pytest.fixture
def carol(store) -> User:
    return seed_user(store, CAROL_ID, "carol", "Carol")


@pytest.fixture
def couple(store, alice, bob) -> Couple:
    """Alice (user1, code issuer) paired with Bob (user2)."""
    return seed_couple(store, COUPLE_ID, alice.user_id, bob.user_id)
