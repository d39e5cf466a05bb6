"""
Couples module interface.

The pulse, notifications, challenges and shark mode modules resolve
couple membership and slots through ICoupleService.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Couple, CoupleView, JoinResponse, PairingCode, Slot


@runtime_checkable
class ICoupleService(Protocol):
    """Interface for pairing and couple operations."""

    async def generate_code(self, user_id: str) -> PairingCode:
        """
        Issue a new 6-digit pairing code for a user.

        The user's current-code pointer is overwritten; any earlier code
        stays redeemable until its own expiry.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    async def get_current_code(self, user_id: str) -> Optional[PairingCode]:
        """Get the most recently issued code for a user, or None."""
        ...

    async def join_with_code(self, user_id: str, code: str) -> JoinResponse:
        """
        Redeem a pairing code and create the couple.

        Raises:
            UserNotFoundError: Unknown user
            AlreadyPairedError: User already belongs to a couple
            InvalidCodeError: Code absent, expired or already used
            SelfJoinError: Issuer redeeming their own code
        """
        ...

    async def get_couple(self, user_id: str) -> Optional[CoupleView]:
        """Get the user's couple with the partner's profile, or None."""
        ...

    async def unpair(self, user_id: str) -> None:
        """
        Dissolve the user's couple. Day-card history is kept.

        Raises:
            CoupleNotFoundError: If the user has no couple
        """
        ...

    async def get_couple_by_id(self, couple_id: str) -> Couple:
        """
        Get a couple record.

        Raises:
            CoupleNotFoundError: If it does not exist
        """
        ...

    async def resolve_slot(self, couple_id: str, user_id: str) -> tuple[Couple, Slot]:
        """
        Get a couple and the slot occupied by user_id.

        Raises:
            CoupleNotFoundError: If the couple does not exist
            NotCoupleMemberError: If user_id is not one of its members
        """
        ...
