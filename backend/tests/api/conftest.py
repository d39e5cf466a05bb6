"""
API test fixtures.

Routes run against the same in-memory services as the service tests, so a
test can seed data through the store and observe it over HTTP.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_couple_service,
    get_daily_challenge_service,
    get_notification_service,
    get_push_sender,
    get_pulse_service,
    get_shark_mode_service,
    get_user_service,
    get_weekly_challenge_service,
)
from shared.config import Settings
from modules.notifications.push import WebPushSender


@pytest.fixture
def push_sender(store, clock) -> WebPushSender:
    settings = Settings(_env_file=None, enable_push=False)
    return WebPushSender(store, settings=settings, clock=clock)


@pytest.fixture
def app(users, couples, pulse, notifications, shark_mode, weekly, daily, push_sender):
    """Create a fresh app wired to the test services."""
    app = create_app()
    app.dependency_overrides.update({
        get_user_service: lambda: users,
        get_couple_service: lambda: couples,
        get_pulse_service: lambda: pulse,
        get_notification_service: lambda: notifications,
        get_push_sender: lambda: push_sender,
        get_shark_mode_service: lambda: shark_mode,
        get_weekly_challenge_service: lambda: weekly,
        get_daily_challenge_service: lambda: daily,
    })
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
