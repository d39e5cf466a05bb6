"""
Shark mode module.

A partner can raise a 1-7 day "need extra care" window that the other
partner sees and can answer with a reassurance message.

Public API:
- ISharkModeService: Interface
- SharkMode, SharkStatus: Models
- effective_shark_status: Read-time expiry derivation
"""

from .interfaces import ISharkModeService
from .models import SharkMode, SharkStatus
from .exceptions import (
    ActivatorCannotReassureError,
    InvalidDurationError,
    NotActivatorError,
    SharkModeAlreadyActiveError,
    SharkModeNotActiveError,
)
from .service import effective_shark_status

__all__ = [
    # Interface
    "ISharkModeService",
    # Models
    "SharkMode",
    "SharkStatus",
    # Exceptions
    "ActivatorCannotReassureError",
    "InvalidDurationError",
    "NotActivatorError",
    "SharkModeAlreadyActiveError",
    "SharkModeNotActiveError",
    # Helpers
    "effective_shark_status",
]
