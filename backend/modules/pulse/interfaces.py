"""
Daily pulse module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import PulseUpdate, TodayCard


@runtime_checkable
class IPulseService(Protocol):
    """Interface for the per-couple, per-day Today Card ledger."""

    async def get_today(self, couple_id: str) -> Optional[TodayCard]:
        """
        Get today's card (UTC date).

        Returns None when nobody has written yet; that is not an error.
        """
        ...

    async def update_today(
        self,
        couple_id: str,
        user_id: str,
        update: PulseUpdate,
    ) -> TodayCard:
        """
        Write the caller's slot on today's card, creating the card if needed.

        Each provided field overwrites the latest value and appends to its
        gallery. The partner's slot is never touched.

        Raises:
            CoupleNotFoundError: If the couple does not exist
            NotCoupleMemberError: If user_id is not in the couple
        """
        ...

    async def add_reaction(self, couple_id: str, user_id: str, emoji: str) -> TodayCard:
        """
        Append a reaction to today's card.

        Raises:
            TodayCardNotFoundError: If today's card does not exist yet
        """
        ...

    async def get_history(self, couple_id: str) -> list[TodayCard]:
        """Get every card for the couple, newest date first."""
        ...
