"""
Notifications module interface.
"""

from typing import Protocol, runtime_checkable

from modules.pulse.models import PulseUpdate

from .models import Notification, NotificationPayload


@runtime_checkable
class INotificationService(Protocol):
    """Interface for partner-directed notifications."""

    async def notify(
        self,
        couple_id: str,
        sender_id: str,
        payload: NotificationPayload,
    ) -> Notification:
        """
        Create a notification addressed to the sender's partner.

        The notification type comes from the payload's ``type`` tag. A
        best-effort push message is attempted; push failures never fail
        this call.

        Raises:
            ValidationError: If a required payload field is empty
            CoupleNotFoundError: If the couple does not exist
            NotCoupleMemberError: If the sender is not in the couple
        """
        ...

    async def notify_pulse_update(
        self,
        couple_id: str,
        sender_id: str,
        update: PulseUpdate,
    ) -> list[Notification]:
        """Notify the partner once per mood, message or doodle in the update."""
        ...

    async def list_for(self, user_id: str) -> list[Notification]:
        """All notifications addressed to the user (read and unread), newest first."""
        ...

    async def mark_read(self, notification_id: str) -> Notification:
        """
        Mark a notification as read. Repeating the call is a no-op.

        Raises:
            NotificationNotFoundError: If the ID is unknown
        """
        ...
