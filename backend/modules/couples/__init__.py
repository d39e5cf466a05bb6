"""
Couples module.

Issues and redeems pairing codes and owns the two-person couple record.

Public API:
- ICoupleService: Interface for pairing and couple operations
- Couple, CoupleView, PairingCode, Slot: Data models
- Couples exceptions: InvalidCodeError, SelfJoinError, etc.
"""

from .interfaces import ICoupleService
from .models import CodeStatus, Couple, CoupleView, PairingCode, Slot
from .exceptions import (
    AlreadyPairedError,
    CoupleNotFoundError,
    InvalidCodeError,
    NotCoupleMemberError,
    SelfJoinError,
)

__all__ = [
    # Interface
    "ICoupleService",
    # Models
    "CodeStatus",
    "Couple",
    "CoupleView",
    "PairingCode",
    "Slot",
    # Exceptions
    "AlreadyPairedError",
    "CoupleNotFoundError",
    "InvalidCodeError",
    "NotCoupleMemberError",
    "SelfJoinError",
]
