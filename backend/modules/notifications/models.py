"""
Notification data models.

Notifications and their send payloads are tagged unions on ``type``, so
each variant only carries the fields legal for that type.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from shared.models import CamelModel


class NotificationType(str, Enum):
    NUDGE = "nudge"
    MOOD_UPDATE = "mood-update"
    MESSAGE_UPDATE = "message-update"
    DOODLE_UPDATE = "doodle-update"


# -----------------------------------------------------------------------------
# Payloads (what the sender supplies)
# -----------------------------------------------------------------------------


class NudgePayload(CamelModel):
    type: Literal["nudge"] = "nudge"


class MoodPayload(CamelModel):
    type: Literal["mood-update"] = "mood-update"
    mood: str
    intensity: Optional[str] = None


class MessagePayload(CamelModel):
    type: Literal["message-update"] = "message-update"
    message: str


class DoodlePayload(CamelModel):
    type: Literal["doodle-update"] = "doodle-update"
    doodle: Optional[str] = Field(None, description="Doodle image reference or data URL")


NotificationPayload = Annotated[
    Union[NudgePayload, MoodPayload, MessagePayload, DoodlePayload],
    Field(discriminator="type"),
]


# -----------------------------------------------------------------------------
# Stored notifications
# -----------------------------------------------------------------------------


class NotificationBase(CamelModel):
    id: str
    couple_id: str
    sender_id: str
    sender_name: str
    receiver_id: str
    timestamp: datetime
    read: bool = False


class NudgeNotification(NotificationBase):
    type: Literal["nudge"] = "nudge"


class MoodUpdateNotification(NotificationBase):
    type: Literal["mood-update"] = "mood-update"
    mood: str
    intensity: Optional[str] = None


class MessageUpdateNotification(NotificationBase):
    type: Literal["message-update"] = "message-update"
    message: str


class DoodleUpdateNotification(NotificationBase):
    type: Literal["doodle-update"] = "doodle-update"
    doodle: Optional[str] = None


Notification = Annotated[
    Union[
        NudgeNotification,
        MoodUpdateNotification,
        MessageUpdateNotification,
        DoodleUpdateNotification,
    ],
    Field(discriminator="type"),
]

notification_adapter: TypeAdapter[Notification] = TypeAdapter(Notification)


# -----------------------------------------------------------------------------
# API requests / responses
# -----------------------------------------------------------------------------


class SendRequest(CamelModel):
    couple_id: str = ""
    sender_id: str = ""


class MoodUpdateRequest(SendRequest):
    mood: str = ""
    intensity: Optional[str] = None


class MessageUpdateRequest(SendRequest):
    message: str = ""


class DoodleUpdateRequest(SendRequest):
    doodle: Optional[str] = None


class NotificationResponse(CamelModel):
    notification: Notification


class NotificationListResponse(CamelModel):
    notifications: list[Notification]


# -----------------------------------------------------------------------------
# Web push
# -----------------------------------------------------------------------------


class PushKeys(CamelModel):
    p256dh: str
    auth: str


class PushSubscription(CamelModel):
    """A browser Web Push subscription registered for one user."""

    endpoint: str
    keys: PushKeys
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    revoked_at: Optional[datetime] = None


class SubscribeRequest(CamelModel):
    user_id: str = ""
    subscription: PushSubscription


class UnsubscribeRequest(CamelModel):
    user_id: str = ""


class VapidKeyResponse(CamelModel):
    public_key: str
