"""
Notifications module exceptions.
"""

from shared.exceptions import NotFoundError


class NotificationNotFoundError(NotFoundError):
    """Raised when a notification ID does not exist."""

    def __init__(self, notification_id: str):
        super().__init__(
            "Notification not found",
            code="NOTIFICATION_NOT_FOUND",
            details={"notification_id": notification_id},
        )
