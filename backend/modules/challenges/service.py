"""
Challenge scheduler service.

Key layout:
    challenge:current:{coupleId}             -> WeeklyChallenge
    challenge:history:{coupleId}:{weekKey}   -> WeeklyChallenge (both completed)
    daily:current:{coupleId}                 -> DailyChallenge
    daily:history:{coupleId}:{date}          -> DailyChallenge (both answered)

The current record is replaced, never merged, when the week (or day)
rolls over. History entries are written once and never overwritten.
"""

import logging
import random
from datetime import date, timedelta
from typing import Optional

from shared.clock import Clock, utc_now
from shared.kv_store import IKeyValueStore
from modules.couples.interfaces import ICoupleService

from .interfaces import IDailyChallengeService, IWeeklyChallengeService
from .library import DAILY_QUESTIONS, WEEKLY_CHALLENGES
from .models import (
    ChallengeStats,
    ChallengeTemplate,
    DailyChallenge,
    DailyStats,
    WeeklyChallenge,
)
from .exceptions import EmptyAnswerError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Calendar helpers
# -----------------------------------------------------------------------------


def week_key_for(day: date) -> str:
    """ISO-8601 week key, e.g. ``2026-W07`` (weeks start on Monday)."""
    iso = day.isocalendar()
    return f"{iso.year}-W{iso.week:02d}"


def week_start(day: date) -> date:
    return day - timedelta(days=day.isoweekday() - 1)


def monday_of(week_key: str) -> date:
    year, week = week_key.split("-W")
    return date.fromisocalendar(int(year), int(week), 1)


def weekly_streak(history: list[WeeklyChallenge]) -> int:
    """
    Count consecutive completed weeks, starting from the newest entry.

    Stops at the first incomplete entry or the first missing week.
    """
    streak = 0
    previous: Optional[date] = None
    for entry in sorted(history, key=lambda c: monday_of(c.week_key), reverse=True):
        if not entry.both_completed:
            break
        monday = monday_of(entry.week_key)
        if previous is not None and monday != previous - timedelta(weeks=1):
            break
        streak += 1
        previous = monday
    return streak


def daily_streak(history: list[DailyChallenge]) -> int:
    """Count consecutive answered days, starting from the newest entry."""
    streak = 0
    previous: Optional[date] = None
    for entry in sorted(history, key=lambda c: c.date, reverse=True):
        if not entry.both_answered:
            break
        day = date.fromisoformat(entry.date)
        if previous is not None and day != previous - timedelta(days=1):
            break
        streak += 1
        previous = day
    return streak


# -----------------------------------------------------------------------------
# Weekly challenge
# -----------------------------------------------------------------------------


class WeeklyChallengeService(IWeeklyChallengeService):
    """Weekly challenge scheduler over the key-value store."""

    def __init__(
        self,
        store: IKeyValueStore,
        couples: ICoupleService,
        clock: Clock = utc_now,
        library: Optional[list[ChallengeTemplate]] = None,
        rng: Optional[random.Random] = None,
    ):
        self._store = store
        self._couples = couples
        self._clock = clock
        self._library = library if library is not None else WEEKLY_CHALLENGES
        self._rng = rng or random.Random()

    @staticmethod
    def _current_key(couple_id: str) -> str:
        return f"challenge:current:{couple_id}"

    @staticmethod
    def _history_prefix(couple_id: str) -> str:
        return f"challenge:history:{couple_id}:"

    def _load_history(self, couple_id: str) -> list[WeeklyChallenge]:
        return [
            WeeklyChallenge.model_validate(doc)
            for doc in self._store.get_by_prefix(self._history_prefix(couple_id))
        ]

    def _select(self, couple_id: str, outgoing: Optional[str] = None) -> ChallengeTemplate:
        """
        Pick a challenge whose title is not in the couple's history.

        The outgoing week's title is also skipped so consecutive weeks
        differ. Once everything has been used the full library is reused.
        """
        used_titles = {entry.title for entry in self._load_history(couple_id)}
        candidates = [
            c for c in self._library if c.title not in used_titles and c.title != outgoing
        ]
        if not candidates:
            candidates = [c for c in self._library if c.title != outgoing] or list(self._library)
        return self._rng.choice(candidates)

    async def get_current(self, couple_id: str) -> WeeklyChallenge:
        await self._couples.get_couple_by_id(couple_id)

        today = self._clock().date()
        key = week_key_for(today)

        outgoing: Optional[str] = None
        doc = self._store.get(self._current_key(couple_id))
        if doc is not None:
            current = WeeklyChallenge.model_validate(doc)
            if current.week_key == key:
                return current
            outgoing = current.title

        template = self._select(couple_id, outgoing)
        start = week_start(today)
        challenge = WeeklyChallenge(
            **template.model_dump(),
            week_key=key,
            start_date=start.isoformat(),
            end_date=(start + timedelta(days=6)).isoformat(),
        )
        self._store.set(self._current_key(couple_id), challenge.to_document())
        logger.info("Selected weekly challenge %s for couple %s (%s)", template.id, couple_id, key)
        return challenge

    async def complete(
        self,
        couple_id: str,
        user_id: str,
        response: Optional[str] = None,
    ) -> tuple[WeeklyChallenge, bool]:
        _, slot = await self._couples.resolve_slot(couple_id, user_id)
        challenge = await self.get_current(couple_id)
        prefix = slot.value

        if getattr(challenge, f"{prefix}_completed"):
            return challenge, False

        now = self._clock()
        setattr(challenge, f"{prefix}_completed", True)
        setattr(challenge, f"{prefix}_completed_at", now)
        if response:
            setattr(challenge, f"{prefix}_response", response)

        just_completed = False
        if challenge.user1_completed and challenge.user2_completed and not challenge.both_completed:
            challenge.both_completed = True
            challenge.both_completed_at = now
            just_completed = True

        self._store.set(self._current_key(couple_id), challenge.to_document())

        if just_completed:
            history_key = f"{self._history_prefix(couple_id)}{challenge.week_key}"
            if self._store.get(history_key) is None:
                self._store.set(history_key, challenge.to_document())
            logger.info("Couple %s completed weekly challenge %s", couple_id, challenge.id)

        return challenge, just_completed

    async def get_history(
        self, couple_id: str
    ) -> tuple[list[WeeklyChallenge], ChallengeStats]:
        history = sorted(
            self._load_history(couple_id),
            key=lambda c: monday_of(c.week_key),
            reverse=True,
        )
        completed = [c for c in history if c.both_completed]
        stats = ChallengeStats(
            total_completed=len(completed),
            total_points=sum(c.points for c in completed),
            current_streak=weekly_streak(history),
        )
        return history, stats


# -----------------------------------------------------------------------------
# Daily question
# -----------------------------------------------------------------------------


class DailyChallengeService(IDailyChallengeService):
    """Daily question scheduler; the same pattern as the weekly challenge."""

    def __init__(
        self,
        store: IKeyValueStore,
        couples: ICoupleService,
        clock: Clock = utc_now,
        questions: Optional[list[str]] = None,
        rng: Optional[random.Random] = None,
    ):
        self._store = store
        self._couples = couples
        self._clock = clock
        self._questions = questions if questions is not None else DAILY_QUESTIONS
        self._rng = rng or random.Random()

    @staticmethod
    def _current_key(couple_id: str) -> str:
        return f"daily:current:{couple_id}"

    @staticmethod
    def _history_prefix(couple_id: str) -> str:
        return f"daily:history:{couple_id}:"

    def _load_history(self, couple_id: str) -> list[DailyChallenge]:
        return [
            DailyChallenge.model_validate(doc)
            for doc in self._store.get_by_prefix(self._history_prefix(couple_id))
        ]

    def _select(self, couple_id: str, outgoing: Optional[str] = None) -> str:
        asked = {entry.question for entry in self._load_history(couple_id)}
        candidates = [q for q in self._questions if q not in asked and q != outgoing]
        if not candidates:
            candidates = [q for q in self._questions if q != outgoing] or list(self._questions)
        return self._rng.choice(candidates)

    async def get_current(self, couple_id: str) -> DailyChallenge:
        await self._couples.get_couple_by_id(couple_id)

        today = self._clock().date().isoformat()
        outgoing: Optional[str] = None
        doc = self._store.get(self._current_key(couple_id))
        if doc is not None:
            current = DailyChallenge.model_validate(doc)
            if current.date == today:
                return current
            outgoing = current.question

        challenge = DailyChallenge(question=self._select(couple_id, outgoing), date=today)
        self._store.set(self._current_key(couple_id), challenge.to_document())
        return challenge

    async def answer(
        self,
        couple_id: str,
        user_id: str,
        answer: str,
    ) -> tuple[DailyChallenge, bool]:
        if not answer or not answer.strip():
            raise EmptyAnswerError()

        _, slot = await self._couples.resolve_slot(couple_id, user_id)
        challenge = await self.get_current(couple_id)
        prefix = slot.value

        if getattr(challenge, f"{prefix}_answer") is not None:
            return challenge, False

        now = self._clock()
        setattr(challenge, f"{prefix}_answer", answer.strip())
        setattr(challenge, f"{prefix}_answered_at", now)

        just_completed = False
        if (
            challenge.user1_answer is not None
            and challenge.user2_answer is not None
            and not challenge.both_answered
        ):
            challenge.both_answered = True
            challenge.both_answered_at = now
            just_completed = True

        self._store.set(self._current_key(couple_id), challenge.to_document())

        if just_completed:
            history_key = f"{self._history_prefix(couple_id)}{challenge.date}"
            if self._store.get(history_key) is None:
                self._store.set(history_key, challenge.to_document())

        return challenge, just_completed

    async def get_history(
        self, couple_id: str
    ) -> tuple[list[DailyChallenge], DailyStats]:
        history = sorted(self._load_history(couple_id), key=lambda c: c.date, reverse=True)
        stats = DailyStats(
            total_answered=sum(1 for c in history if c.both_answered),
            current_streak=daily_streak(history),
        )
        return history, stats
