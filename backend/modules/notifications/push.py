"""
Web Push delivery.

Stores one browser subscription per user and sends best-effort push
messages via pywebpush. Delivery never raises: failures are logged and
reported as False, and subscriptions rejected with 404/410 are revoked.
"""

import json
import logging
from typing import Any, Optional, Protocol, runtime_checkable

from pywebpush import webpush, WebPushException

from shared.clock import Clock, utc_now
from shared.config import Settings, get_settings
from shared.kv_store import IKeyValueStore

from .models import Notification, PushSubscription

logger = logging.getLogger(__name__)


def subscription_key(user_id: str) -> str:
    return f"push_subscription:{user_id}"


@runtime_checkable
class IPushSender(Protocol):
    """Interface for best-effort push delivery."""

    def subscribe(self, user_id: str, subscription: PushSubscription) -> PushSubscription:
        ...

    def unsubscribe(self, user_id: str) -> None:
        ...

    def send_to_user(self, user_id: str, payload: dict[str, Any]) -> bool:
        ...


def build_push_payload(notification: Notification) -> dict[str, Any]:
    """Title/body payload shown by the service worker for a notification."""
    sender = notification.sender_name
    payload: dict[str, Any] = {
        "icon": "/logo.svg",
        "badge": "/logo.svg",
        "tag": f"aimo-pulse-{notification.type}",
        "data": {"url": "/", "type": notification.type},
    }

    if notification.type == "nudge":
        payload["title"] = f"💗 Nudge from {sender}"
        payload["body"] = f"{sender} wants to know how you're doing!"
    elif notification.type == "mood-update":
        payload["title"] = f"😊 {sender} shared their mood"
        payload["body"] = notification.mood or "Check out their latest update!"
        payload["data"]["mood"] = notification.mood
    elif notification.type == "message-update":
        payload["title"] = f"💌 New message from {sender}"
        payload["body"] = notification.message or "Tap to read the message"
    else:
        payload["title"] = f"🎨 {sender} drew something for you"
        payload["body"] = "See their latest doodle!"

    return payload


class WebPushSender(IPushSender):
    """Push sender backed by pywebpush and the key-value store."""

    def __init__(
        self,
        store: IKeyValueStore,
        settings: Optional[Settings] = None,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._settings = settings or get_settings()
        self._clock = clock

    def subscribe(self, user_id: str, subscription: PushSubscription) -> PushSubscription:
        stored = subscription.model_copy(
            update={"user_id": user_id, "created_at": self._clock(), "revoked_at": None}
        )
        self._store.set(subscription_key(user_id), stored.to_document())
        logger.info("Registered push subscription for user %s", user_id)
        return stored

    def unsubscribe(self, user_id: str) -> None:
        self._store.delete(subscription_key(user_id))

    def _revoke(self, user_id: str, subscription: PushSubscription) -> None:
        revoked = subscription.model_copy(update={"revoked_at": self._clock()})
        self._store.set(subscription_key(user_id), revoked.to_document())

    def send_to_user(self, user_id: str, payload: dict[str, Any]) -> bool:
        """
        Send a push message to the user's registered device.

        Returns True on success, False when push is disabled or unconfigured,
        the user has no live subscription, or delivery failed.
        """
        if not self._settings.enable_push:
            return False
        if not self._settings.vapid_private_key or not self._settings.vapid_public_key:
            logger.warning("VAPID keys not configured, skipping push")
            return False

        doc = self._store.get(subscription_key(user_id))
        if doc is None:
            logger.debug("No push subscription for user %s", user_id)
            return False
        subscription = PushSubscription.model_validate(doc)
        if subscription.revoked_at is not None:
            logger.debug("Push subscription revoked for user %s", user_id)
            return False

        try:
            webpush(
                subscription_info={
                    "endpoint": subscription.endpoint,
                    "keys": {
                        "p256dh": subscription.keys.p256dh,
                        "auth": subscription.keys.auth,
                    },
                },
                data=json.dumps(payload, ensure_ascii=False),
                vapid_private_key=self._settings.vapid_private_key,
                vapid_claims={"sub": self._settings.vapid_subject},
            )
            return True
        except WebPushException as e:
            status_code = e.response.status_code if e.response is not None else 0
            if status_code in (404, 410):
                logger.info(
                    "Subscription expired (HTTP %d), revoking for user %s",
                    status_code,
                    user_id,
                )
                self._revoke(user_id, subscription)
            else:
                logger.error("WebPush error (HTTP %d): %s", status_code, e)
            return False
