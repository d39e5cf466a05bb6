"""
Notification fan-out service.

Key layout:
    notification:{id}                        -> Notification
    notification:user:{receiverId}:{id}      -> id
"""

import asyncio
import logging
from typing import Optional

from shared.clock import Clock, generate_id, utc_now
from shared.exceptions import ValidationError
from shared.kv_store import IKeyValueStore
from modules.couples.interfaces import ICoupleService
from modules.users.interfaces import IUserService
from modules.pulse.models import PulseUpdate

from .interfaces import INotificationService
from .models import (
    DoodlePayload,
    MessagePayload,
    MoodPayload,
    Notification,
    NotificationPayload,
    notification_adapter,
)
from .push import IPushSender, build_push_payload
from .exceptions import NotificationNotFoundError

logger = logging.getLogger(__name__)


def notification_key(notification_id: str) -> str:
    return f"notification:{notification_id}"


def inbox_prefix(user_id: str) -> str:
    return f"notification:user:{user_id}:"


def _validate_payload(payload: NotificationPayload) -> None:
    if isinstance(payload, MoodPayload) and not payload.mood:
        raise ValidationError("Mood is required", code="MISSING_FIELDS")
    if isinstance(payload, MessagePayload) and not payload.message:
        raise ValidationError("Message is required", code="MISSING_FIELDS")


class NotificationService(INotificationService):
    """Notification fan-out over the key-value store."""

    def __init__(
        self,
        store: IKeyValueStore,
        couples: ICoupleService,
        users: IUserService,
        push: Optional[IPushSender] = None,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._couples = couples
        self._users = users
        self._push = push
        self._clock = clock

    async def notify(
        self,
        couple_id: str,
        sender_id: str,
        payload: NotificationPayload,
    ) -> Notification:
        if not couple_id or not sender_id:
            raise ValidationError(
                "Couple ID and sender ID are required",
                code="MISSING_FIELDS",
            )
        _validate_payload(payload)

        couple, _ = await self._couples.resolve_slot(couple_id, sender_id)
        receiver_id = couple.partner_of(sender_id)
        sender = await self._users.require_user(sender_id)

        notification = notification_adapter.validate_python(
            {
                **payload.model_dump(),
                "id": generate_id(),
                "couple_id": couple_id,
                "sender_id": sender_id,
                "sender_name": sender.display_name,
                "receiver_id": receiver_id,
                "timestamp": self._clock(),
                "read": False,
            }
        )

        self._store.set(notification_key(notification.id), notification.to_document())
        self._store.set(f"{inbox_prefix(receiver_id)}{notification.id}", notification.id)

        await self._deliver_push(receiver_id, notification)
        return notification

    async def _deliver_push(self, receiver_id: str, notification: Notification) -> None:
        if self._push is None:
            return
        try:
            await asyncio.to_thread(
                self._push.send_to_user,
                receiver_id,
                build_push_payload(notification),
            )
        except Exception:
            logger.warning(
                "Push delivery failed for notification %s",
                notification.id,
                exc_info=True,
            )

    async def notify_pulse_update(
        self,
        couple_id: str,
        sender_id: str,
        update: PulseUpdate,
    ) -> list[Notification]:
        """
        Send one notification per field present in a pulse update.

        Failures are logged and skipped so they never affect the update
        that triggered them.
        """
        payloads: list[NotificationPayload] = []
        if update.mood:
            payloads.append(MoodPayload(mood=update.mood, intensity=update.intensity))
        if update.message:
            payloads.append(MessagePayload(message=update.message))
        if update.doodle:
            payloads.append(DoodlePayload(doodle=update.doodle))

        sent: list[Notification] = []
        for payload in payloads:
            try:
                sent.append(await self.notify(couple_id, sender_id, payload))
            except Exception:
                logger.warning(
                    "Failed to send %s notification for couple %s",
                    payload.type,
                    couple_id,
                    exc_info=True,
                )
        return sent

    async def list_for(self, user_id: str) -> list[Notification]:
        if not user_id:
            return []
        ids = self._store.get_by_prefix(inbox_prefix(user_id))
        if not ids:
            return []

        documents = self._store.get_many([notification_key(i) for i in ids])
        notifications = [
            notification_adapter.validate_python(doc)
            for doc in documents
            if doc is not None
        ]
        return sorted(notifications, key=lambda n: n.timestamp, reverse=True)

    async def mark_read(self, notification_id: str) -> Notification:
        doc = self._store.get(notification_key(notification_id))
        if doc is None:
            raise NotificationNotFoundError(notification_id)

        notification = notification_adapter.validate_python(doc)
        if not notification.read:
            notification.read = True
            self._store.set(notification_key(notification_id), notification.to_document())
        return notification
