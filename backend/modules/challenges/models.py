"""
Challenge scheduler data models.

One weekly challenge and one daily question are shared per couple. Each
partner completes their own slot; the record is archived once both have.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from shared.models import CamelModel


class ChallengeTemplate(CamelModel):
    """A weekly challenge from the content library."""

    id: str
    category: str
    title: str
    description: str
    points: int = Field(..., ge=0)


class WeeklyChallenge(ChallengeTemplate):
    week_key: str = Field(..., description="ISO week, e.g. 2026-W07")
    start_date: str = Field(..., description="Monday of the week (YYYY-MM-DD)")
    end_date: str = Field(..., description="Sunday of the week (YYYY-MM-DD)")

    user1_completed: bool = False
    user1_completed_at: Optional[datetime] = None
    user1_response: Optional[str] = None
    user2_completed: bool = False
    user2_completed_at: Optional[datetime] = None
    user2_response: Optional[str] = None

    both_completed: bool = False
    both_completed_at: Optional[datetime] = None


class DailyChallenge(CamelModel):
    question: str
    date: str = Field(..., description="UTC date (YYYY-MM-DD)")

    user1_answer: Optional[str] = None
    user1_answered_at: Optional[datetime] = None
    user2_answer: Optional[str] = None
    user2_answered_at: Optional[datetime] = None

    both_answered: bool = False
    both_answered_at: Optional[datetime] = None


class ChallengeStats(CamelModel):
    total_completed: int = 0
    total_points: int = 0
    current_streak: int = 0


class DailyStats(CamelModel):
    total_answered: int = 0
    current_streak: int = 0


class CompleteChallengeRequest(CamelModel):
    couple_id: str = ""
    user_id: str = ""
    response: Optional[str] = None


class AnswerQuestionRequest(CamelModel):
    couple_id: str = ""
    user_id: str = ""
    answer: str = ""


class WeeklyChallengeResponse(CamelModel):
    challenge: WeeklyChallenge
    just_completed: bool = False


class WeeklyHistoryResponse(CamelModel):
    history: list[WeeklyChallenge]
    stats: ChallengeStats


class DailyChallengeResponse(CamelModel):
    challenge: DailyChallenge
    just_completed: bool = False


class DailyHistoryResponse(CamelModel):
    history: list[DailyChallenge]
    stats: DailyStats
