"""
Challenges module interfaces.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    DailyChallenge,
    DailyStats,
    ChallengeStats,
    WeeklyChallenge,
)


@runtime_checkable
class IWeeklyChallengeService(Protocol):
    """Interface for the shared weekly challenge."""

    async def get_current(self, couple_id: str) -> WeeklyChallenge:
        """
        Get this ISO week's challenge, selecting a new one on rollover.

        Raises:
            CoupleNotFoundError: If the couple does not exist
        """
        ...

    async def complete(
        self,
        couple_id: str,
        user_id: str,
        response: Optional[str] = None,
    ) -> tuple[WeeklyChallenge, bool]:
        """
        Mark the caller's half complete.

        Returns the challenge and ``just_completed``, which is True only
        for the call that made both halves complete.
        """
        ...

    async def get_history(
        self, couple_id: str
    ) -> tuple[list[WeeklyChallenge], ChallengeStats]:
        """Completed challenges, newest week first, with totals and streak."""
        ...


@runtime_checkable
class IDailyChallengeService(Protocol):
    """Interface for the shared daily question."""

    async def get_current(self, couple_id: str) -> DailyChallenge:
        ...

    async def answer(
        self,
        couple_id: str,
        user_id: str,
        answer: str,
    ) -> tuple[DailyChallenge, bool]:
        ...

    async def get_history(
        self, couple_id: str
    ) -> tuple[list[DailyChallenge], DailyStats]:
        ...
