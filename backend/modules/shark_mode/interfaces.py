"""
Shark mode module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import SharkMode


@runtime_checkable
class ISharkModeService(Protocol):
    """Interface for shark mode time windows."""

    async def activate(
        self,
        couple_id: str,
        user_id: str,
        duration_days: int,
        note: str = "",
    ) -> SharkMode:
        """
        Start shark mode for 1-7 days.

        Raises:
            InvalidDurationError: Duration outside 1-7 days
            SharkModeAlreadyActiveError: The couple already has one active
        """
        ...

    async def extend(self, couple_id: str, user_id: str, additional_days: int) -> SharkMode:
        """
        Push the end date out. Activator only; total window capped at 7 days
        from the original activation.
        """
        ...

    async def deactivate(self, couple_id: str, user_id: str) -> SharkMode:
        """End shark mode early. Activator only; repeating is a no-op."""
        ...

    async def update_note(self, couple_id: str, user_id: str, note: str) -> SharkMode:
        """Replace the note. Activator only."""
        ...

    async def send_reassurance(self, couple_id: str, user_id: str, text: str) -> SharkMode:
        """Attach a reassurance message. Only the partner may reassure."""
        ...

    async def get_status(self, couple_id: str) -> Optional[SharkMode]:
        """The active record, or None once deactivated or past ``ends_at``."""
        ...

    async def get_history(self, couple_id: str) -> list[SharkMode]:
        """Every activation for the couple, newest first."""
        ...
