"""
Shark mode service implementation.

Key layout:
    shark:active:{coupleId}          -> SharkMode (latest record, any status)
    shark:history:{coupleId}:{id}    -> SharkMode (every activation)

Reads derive the effective status without writing; an expired record is
only persisted as expired when a mutation touches it.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from shared.clock import Clock, generate_id, utc_now
from shared.config import get_settings
from shared.exceptions import ValidationError
from shared.kv_store import IKeyValueStore
from modules.couples.interfaces import ICoupleService

from .interfaces import ISharkModeService
from .models import SharkMode, SharkStatus
from .exceptions import (
    ActivatorCannotReassureError,
    InvalidDurationError,
    NotActivatorError,
    SharkModeAlreadyActiveError,
    SharkModeNotActiveError,
)

logger = logging.getLogger(__name__)


def effective_shark_status(record: SharkMode, now: datetime) -> SharkStatus:
    """Status of a record at ``now``; an active record past ``ends_at`` reads as expired."""
    if record.status == SharkStatus.ACTIVE and now > record.ends_at:
        return SharkStatus.EXPIRED
    return record.status


def with_effective_status(record: SharkMode, now: datetime) -> SharkMode:
    status = effective_shark_status(record, now)
    if status == record.status:
        return record
    return record.model_copy(update={"status": status})


class SharkModeService(ISharkModeService):
    """Shark mode windows over the key-value store."""

    def __init__(
        self,
        store: IKeyValueStore,
        couples: ICoupleService,
        clock: Clock = utc_now,
        max_days: Optional[int] = None,
    ):
        self._store = store
        self._couples = couples
        self._clock = clock
        self._max_days = max_days or get_settings().shark_mode_max_days

    @staticmethod
    def _active_key(couple_id: str) -> str:
        return f"shark:active:{couple_id}"

    @staticmethod
    def _history_prefix(couple_id: str) -> str:
        return f"shark:history:{couple_id}:"

    def _load_live(self, couple_id: str) -> Optional[SharkMode]:
        doc = self._store.get(self._active_key(couple_id))
        return SharkMode.model_validate(doc) if doc is not None else None

    def _save(self, record: SharkMode) -> None:
        document = record.to_document()
        self._store.set(self._active_key(record.couple_id), document)
        self._store.set(f"{self._history_prefix(record.couple_id)}{record.id}", document)

    def _settle(self, record: SharkMode, now: datetime) -> SharkMode:
        """Persist a lazy expiry before a mutation acts on the record."""
        settled = with_effective_status(record, now)
        if settled is not record:
            self._save(settled)
            logger.info("Shark mode %s expired for couple %s", record.id, record.couple_id)
        return settled

    def _require_active(self, couple_id: str, now: datetime) -> SharkMode:
        record = self._load_live(couple_id)
        if record is None:
            raise SharkModeNotActiveError(couple_id)
        record = self._settle(record, now)
        if record.status != SharkStatus.ACTIVE:
            raise SharkModeNotActiveError(couple_id)
        return record

    async def activate(
        self,
        couple_id: str,
        user_id: str,
        duration_days: int,
        note: str = "",
    ) -> SharkMode:
        if not 1 <= duration_days <= self._max_days:
            raise InvalidDurationError(
                f"Duration must be between 1 and {self._max_days} days",
                max_days=self._max_days,
            )

        await self._couples.resolve_slot(couple_id, user_id)

        now = self._clock()
        current = self._load_live(couple_id)
        if current is not None and self._settle(current, now).status == SharkStatus.ACTIVE:
            raise SharkModeAlreadyActiveError(couple_id)

        record = SharkMode(
            id=generate_id(),
            couple_id=couple_id,
            activated_by=user_id,
            activated_at=now,
            ends_at=now + timedelta(days=duration_days),
            duration_days=duration_days,
            note=note or "",
        )
        self._save(record)
        logger.info(
            "User %s activated shark mode for couple %s (%d days)",
            user_id,
            couple_id,
            duration_days,
        )
        return record

    async def extend(self, couple_id: str, user_id: str, additional_days: int) -> SharkMode:
        if additional_days < 1:
            raise InvalidDurationError(
                "Extension must be at least 1 day", max_days=self._max_days
            )

        record = self._require_active(couple_id, self._clock())
        if record.activated_by != user_id:
            raise NotActivatorError(user_id)

        ends_at = record.ends_at + timedelta(days=additional_days)
        if ends_at > record.activated_at + timedelta(days=self._max_days):
            raise InvalidDurationError(
                f"Shark mode cannot last more than {self._max_days} days",
                max_days=self._max_days,
            )

        record = record.model_copy(
            update={
                "ends_at": ends_at,
                "duration_days": record.duration_days + additional_days,
            }
        )
        self._save(record)
        return record

    async def deactivate(self, couple_id: str, user_id: str) -> SharkMode:
        record = self._load_live(couple_id)
        if record is None:
            raise SharkModeNotActiveError(couple_id)
        if record.activated_by != user_id:
            raise NotActivatorError(user_id)

        now = self._clock()
        record = self._settle(record, now)
        if record.status != SharkStatus.ACTIVE:
            return record

        record = record.model_copy(
            update={"status": SharkStatus.DEACTIVATED, "deactivated_at": now}
        )
        self._save(record)
        logger.info("Shark mode %s deactivated for couple %s", record.id, couple_id)
        return record

    async def update_note(self, couple_id: str, user_id: str, note: str) -> SharkMode:
        record = self._require_active(couple_id, self._clock())
        if record.activated_by != user_id:
            raise NotActivatorError(user_id)

        record = record.model_copy(update={"note": note or ""})
        self._save(record)
        return record

    async def send_reassurance(self, couple_id: str, user_id: str, text: str) -> SharkMode:
        if not text or not text.strip():
            raise ValidationError("Reassurance cannot be empty", code="EMPTY_REASSURANCE")

        await self._couples.resolve_slot(couple_id, user_id)

        now = self._clock()
        record = self._require_active(couple_id, now)
        if record.activated_by == user_id:
            raise ActivatorCannotReassureError(user_id)

        record = record.model_copy(
            update={
                "reassurance": text.strip(),
                "reassurance_by": user_id,
                "reassurance_at": now,
            }
        )
        self._save(record)
        return record

    async def get_status(self, couple_id: str) -> Optional[SharkMode]:
        record = self._load_live(couple_id)
        if record is None:
            return None
        if effective_shark_status(record, self._clock()) != SharkStatus.ACTIVE:
            return None
        return record

    async def get_history(self, couple_id: str) -> list[SharkMode]:
        now = self._clock()
        history = [
            with_effective_status(SharkMode.model_validate(doc), now)
            for doc in self._store.get_by_prefix(self._history_prefix(couple_id))
        ]
        return sorted(history, key=lambda r: r.activated_at, reverse=True)
