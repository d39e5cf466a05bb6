"""
Challenges module.

Schedules one shared weekly challenge (keyed by ISO week) and one shared
daily question (keyed by UTC date) per couple.

Public API:
- IWeeklyChallengeService, IDailyChallengeService: Interfaces
- WeeklyChallenge, DailyChallenge, ChallengeStats, DailyStats: Models
- week_key_for, weekly_streak, daily_streak: Calendar helpers
"""

from .interfaces import IDailyChallengeService, IWeeklyChallengeService
from .models import (
    ChallengeStats,
    ChallengeTemplate,
    DailyChallenge,
    DailyStats,
    WeeklyChallenge,
)
from .exceptions import EmptyAnswerError
from .service import daily_streak, week_key_for, weekly_streak

__all__ = [
    # Interfaces
    "IWeeklyChallengeService",
    "IDailyChallengeService",
    # Models
    "ChallengeStats",
    "ChallengeTemplate",
    "DailyChallenge",
    "DailyStats",
    "WeeklyChallenge",
    # Exceptions
    "EmptyAnswerError",
    # Helpers
    "week_key_for",
    "weekly_streak",
    "daily_streak",
]
