"""
Shark mode data models.

Shark mode is a time-boxed "I need extra care" status one partner raises
for the other to see. At most one record per couple is active.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from shared.models import CamelModel


class SharkStatus(str, Enum):
    ACTIVE = "active"
    DEACTIVATED = "deactivated"
    EXPIRED = "expired"


class SharkMode(CamelModel):
    id: str
    couple_id: str
    activated_by: str
    activated_at: datetime
    ends_at: datetime
    duration_days: int = Field(..., ge=1)
    note: str = ""
    reassurance: Optional[str] = None
    reassurance_by: Optional[str] = None
    reassurance_at: Optional[datetime] = None
    status: SharkStatus = SharkStatus.ACTIVE
    deactivated_at: Optional[datetime] = None


class ActivateRequest(CamelModel):
    couple_id: str = ""
    user_id: str = ""
    duration_days: int
    note: str = ""


class ExtendRequest(CamelModel):
    couple_id: str = ""
    user_id: str = ""
    additional_days: int = 1


class DeactivateRequest(CamelModel):
    couple_id: str = ""
    user_id: str = ""


class UpdateNoteRequest(CamelModel):
    couple_id: str = ""
    user_id: str = ""
    note: str = ""


class ReassuranceRequest(CamelModel):
    couple_id: str = ""
    user_id: str = ""
    reassurance: str = ""


class SharkModeResponse(CamelModel):
    shark_mode: SharkMode


class SharkModeStatusResponse(CamelModel):
    shark_mode: Optional[SharkMode] = None
    active: bool = False


class SharkModeHistoryResponse(CamelModel):
    history: list[SharkMode]
