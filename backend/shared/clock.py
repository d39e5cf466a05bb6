"""
Time and identifier helpers.

Services take a ``Clock`` so tests can move time forward without patching
the datetime module.
"""

import secrets
import time
from datetime import date, datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_date(moment: datetime) -> str:
    """UTC calendar date of moment as YYYY-MM-DD."""
    return moment.astimezone(timezone.utc).date().isoformat()


def parse_date(value: str) -> date:
    return date.fromisoformat(value)


def generate_id() -> str:
    """
    Opaque, time-ordered unique identifier.

    Millisecond timestamp followed by random hex, e.g. ``1767225600000-9f2c41ab77e0``.
    """
    return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}"
