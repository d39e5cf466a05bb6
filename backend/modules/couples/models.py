"""
Couples module data models.

Pairing codes and the two-person couple relationship.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from shared.models import CamelModel
from modules.users.models import PublicUser


class CodeStatus(str, Enum):
    """Pairing code lifecycle. USED and EXPIRED are terminal."""

    ACTIVE = "active"
    USED = "used"
    EXPIRED = "expired"


class Slot(str, Enum):
    """
    Which half of a couple a user occupies.

    USER1 is always the pairing code issuer, USER2 the redeemer. Every
    per-partner field in shared documents is prefixed with the slot name.
    """

    USER1 = "user1"
    USER2 = "user2"


class PairingCode(CamelModel):
    """A short-lived 6-digit one-time pairing token."""

    code: str = Field(..., description="6 numeric digits")
    user_id: str = Field(..., description="Issuer user ID")
    created_at: datetime
    expires_at: datetime
    status: CodeStatus = CodeStatus.ACTIVE
    couple_id: Optional[str] = Field(None, description="Set once the code is used")


class Couple(CamelModel):
    """Exactly-two-party relationship."""

    couple_id: str
    user1_id: str = Field(..., description="Pairing code issuer")
    user2_id: str = Field(..., description="Pairing code redeemer")
    created_at: datetime

    def slot_of(self, user_id: str) -> Optional[Slot]:
        if user_id == self.user1_id:
            return Slot.USER1
        if user_id == self.user2_id:
            return Slot.USER2
        return None

    def partner_of(self, user_id: str) -> str:
        return self.user2_id if user_id == self.user1_id else self.user1_id


class CoupleView(CamelModel):
    """A couple as seen by one of its members."""

    couple_id: str
    created_at: datetime
    user1_id: str
    user2_id: str
    partner: PublicUser


class GenerateCodeRequest(CamelModel):
    user_id: str = ""


class GenerateCodeResponse(CamelModel):
    code: str
    expires_at: datetime


class JoinRequest(CamelModel):
    user_id: str = ""
    code: str = ""


class JoinResponse(CamelModel):
    couple_id: str
    partner: PublicUser


class NoCoupleResponse(CamelModel):
    """Returned by couple lookup when the user is unpaired."""

    couple: None = None


class NoCodeResponse(CamelModel):
    """Returned by current-code lookup when the user never issued one."""

    code: None = None
