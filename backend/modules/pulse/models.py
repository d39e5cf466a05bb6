"""
Daily pulse data models.

A TodayCard is the single shared document per couple per UTC date. Each
partner writes only the fields prefixed with their slot (``user1_*`` or
``user2_*``), so the two partners never overwrite each other's data.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from shared.models import CamelModel


class GalleryEntry(CamelModel):
    """One historical value of a mood, message or doodle."""

    value: str
    timestamp: datetime
    user_id: str
    intensity: Optional[str] = Field(None, description="Mood intensity (mood gallery only)")


class Reaction(CamelModel):
    user_id: str
    emoji: str
    timestamp: datetime


class TodayCard(CamelModel):
    """Shared per-day document for one couple."""

    couple_id: str
    date: str = Field(..., description="UTC calendar date, YYYY-MM-DD")

    user1_mood: Optional[str] = None
    user1_intensity: Optional[str] = None
    user1_message: Optional[str] = None
    user1_doodle: Optional[str] = None
    user1_mood_gallery: list[GalleryEntry] = Field(default_factory=list)
    user1_message_gallery: list[GalleryEntry] = Field(default_factory=list)
    user1_doodle_gallery: list[GalleryEntry] = Field(default_factory=list)
    user1_updated_at: Optional[datetime] = None

    user2_mood: Optional[str] = None
    user2_intensity: Optional[str] = None
    user2_message: Optional[str] = None
    user2_doodle: Optional[str] = None
    user2_mood_gallery: list[GalleryEntry] = Field(default_factory=list)
    user2_message_gallery: list[GalleryEntry] = Field(default_factory=list)
    user2_doodle_gallery: list[GalleryEntry] = Field(default_factory=list)
    user2_updated_at: Optional[datetime] = None

    updated_by: Optional[str] = Field(None, description="Last writer (last-writer-wins)")
    updated_at: Optional[datetime] = None
    reactions: list[Reaction] = Field(default_factory=list)


class PulseUpdate(CamelModel):
    """Fields a partner may set on today's card. None means not provided."""

    mood: Optional[str] = None
    intensity: Optional[str] = None
    message: Optional[str] = None
    doodle: Optional[str] = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.mood, self.intensity, self.message, self.doodle)
        )


class UpdateTodayRequest(PulseUpdate):
    user_id: str = ""
    notify_partner: bool = Field(
        default=False,
        description="Also send mood/message/doodle notifications to the partner",
    )


class ReactRequest(CamelModel):
    user_id: str = ""
    emoji: str = ""


class TodayCardResponse(CamelModel):
    today_card: Optional[TodayCard] = None


class HistoryResponse(CamelModel):
    history: list[TodayCard]
