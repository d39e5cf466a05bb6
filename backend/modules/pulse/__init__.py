"""
Daily pulse module.

Owns the shared Today Card per couple per UTC date: moods, messages,
doodles with their galleries, and reactions.

Public API:
- IPulseService: Interface for Today Card operations
- TodayCard, PulseUpdate, GalleryEntry, Reaction: Data models
- TodayCardNotFoundError
"""

from .interfaces import IPulseService
from .models import GalleryEntry, PulseUpdate, Reaction, TodayCard
from .exceptions import TodayCardNotFoundError

__all__ = [
    "IPulseService",
    "GalleryEntry",
    "PulseUpdate",
    "Reaction",
    "TodayCard",
    "TodayCardNotFoundError",
]
