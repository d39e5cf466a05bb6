"""
Notifications module.

Creates partner-directed notification records and delivers best-effort
Web Push messages.

Public API:
- INotificationService: Interface for notification operations
- IPushSender: Interface for push delivery
- Notification variants and payloads (tagged on ``type``)
"""

from .interfaces import INotificationService
from .push import IPushSender, WebPushSender, build_push_payload
from .models import (
    NotificationType,
    Notification,
    NotificationPayload,
    NudgePayload,
    MoodPayload,
    MessagePayload,
    DoodlePayload,
    PushSubscription,
)
from .exceptions import NotificationNotFoundError

__all__ = [
    # Interfaces
    "INotificationService",
    "IPushSender",
    # Push
    "WebPushSender",
    "build_push_payload",
    # Models
    "NotificationType",
    "Notification",
    "NotificationPayload",
    "NudgePayload",
    "MoodPayload",
    "MessagePayload",
    "DoodlePayload",
    "PushSubscription",
    # Exceptions
    "NotificationNotFoundError",
]
