"""Tests for Web Push delivery."""

from datetime import timezone, datetime
from unittest.mock import MagicMock, patch

import pytest
from pywebpush import WebPushException

from shared.config import Settings
from modules.notifications.models import (
    MessageUpdateNotification,
    MoodUpdateNotification,
    NudgeNotification,
    PushKeys,
    PushSubscription,
)
from modules.notifications.push import WebPushSender, build_push_payload, subscription_key


NOW = datetime(2026, 3, 4, 12, 0, tzinfo=timezone.utc)


def make_settings(**overrides) -> Settings:
    values = {
        "vapid_public_key": "test-public-key",
        "vapid_private_key": "test-private-key",
        "enable_push": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_subscription() -> PushSubscription:
    return PushSubscription(
        endpoint="https://push.example.com/send/abc",
        keys=PushKeys(p256dh="p256dh-key", auth="auth-secret"),
    )


def notification_fields() -> dict:
    return {
        "id": "n1",
        "couple_id": "c1",
        "sender_id": "u1",
        "sender_name": "Alice",
        "receiver_id": "u2",
        "timestamp": NOW,
    }


class TestBuildPushPayload:
    def test_nudge(self):
        payload = build_push_payload(NudgeNotification(**notification_fields()))

        assert payload["title"] == "💗 Nudge from Alice"
        assert payload["tag"] == "aimo-pulse-nudge"
        assert payload["data"]["type"] == "nudge"

    def test_mood_update_uses_mood_as_body(self):
        payload = build_push_payload(MoodUpdateNotification(**notification_fields(), mood="😊"))

        assert payload["body"] == "😊"
        assert payload["data"]["mood"] == "😊"

    def test_message_update_uses_message_as_body(self):
        payload = build_push_payload(
            MessageUpdateNotification(**notification_fields(), message="miss you")
        )
        assert payload["body"] == "miss you"


class TestWebPushSender:
    def test_subscribe_stores_subscription(self, store, clock):
        sender = WebPushSender(store, settings=make_settings(), clock=clock)

        stored = sender.subscribe("u2", make_subscription())

        assert stored.user_id == "u2"
        assert store.get(subscription_key("u2"))["endpoint"] == "https://push.example.com/send/abc"

    def test_unsubscribe_removes_subscription(self, store, clock):
        sender = WebPushSender(store, settings=make_settings(), clock=clock)
        sender.subscribe("u2", make_subscription())

        sender.unsubscribe("u2")

        assert store.get(subscription_key("u2")) is None

    @patch("modules.notifications.push.webpush")
    def test_send_to_user(self, mock_webpush, store, clock):
        sender = WebPushSender(store, settings=make_settings(), clock=clock)
        sender.subscribe("u2", make_subscription())

        assert sender.send_to_user("u2", {"title": "hi"}) is True

        kwargs = mock_webpush.call_args.kwargs
        assert kwargs["subscription_info"]["endpoint"] == "https://push.example.com/send/abc"
        assert kwargs["subscription_info"]["keys"] == {"p256dh": "p256dh-key", "auth": "auth-secret"}
        assert kwargs["vapid_private_key"] == "test-private-key"

    @patch("modules.notifications.push.webpush")
    def test_no_subscription(self, mock_webpush, store, clock):
        sender = WebPushSender(store, settings=make_settings(), clock=clock)

        assert sender.send_to_user("u2", {"title": "hi"}) is False
        mock_webpush.assert_not_called()

    @patch("modules.notifications.push.webpush")
    def test_push_disabled(self, mock_webpush, store, clock):
        sender = WebPushSender(store, settings=make_settings(enable_push=False), clock=clock)
        sender.subscribe("u2", make_subscription())

        assert sender.send_to_user("u2", {"title": "hi"}) is False
        mock_webpush.assert_not_called()

    @patch("modules.notifications.push.webpush")
    def test_missing_vapid_keys(self, mock_webpush, store, clock):
        sender = WebPushSender(store, settings=make_settings(vapid_private_key=""), clock=clock)
        sender.subscribe("u2", make_subscription())

        assert sender.send_to_user("u2", {"title": "hi"}) is False
        mock_webpush.assert_not_called()

    @pytest.mark.parametrize("status_code", [404, 410])
    @patch("modules.notifications.push.webpush")
    def test_gone_subscription_is_revoked(self, mock_webpush, status_code, store, clock):
        response = MagicMock(status_code=status_code)
        mock_webpush.side_effect = WebPushException("gone", response=response)
        sender = WebPushSender(store, settings=make_settings(), clock=clock)
        sender.subscribe("u2", make_subscription())

        assert sender.send_to_user("u2", {"title": "hi"}) is False
        assert store.get(subscription_key("u2"))["revokedAt"] is not None

        mock_webpush.reset_mock()
        assert sender.send_to_user("u2", {"title": "hi"}) is False
        mock_webpush.assert_not_called()

    @patch("modules.notifications.push.webpush")
    def test_other_errors_keep_subscription(self, mock_webpush, store, clock):
        mock_webpush.side_effect = WebPushException("server error", response=MagicMock(status_code=500))
        sender = WebPushSender(store, settings=make_settings(), clock=clock)
        sender.subscribe("u2", make_subscription())

        assert sender.send_to_user("u2", {"title": "hi"}) is False
        assert store.get(subscription_key("u2"))["revokedAt"] is None
