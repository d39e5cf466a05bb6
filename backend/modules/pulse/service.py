"""
Daily pulse service implementation.

Cards are stored under ``today:{coupleId}:{YYYY-MM-DD}`` and read-modify-
written as a whole document. Partners write disjoint slot-prefixed fields;
the shared metadata (updatedBy, updatedAt, reactions) is last-writer-wins.
"""

import logging
from typing import Optional

from shared.clock import Clock, utc_date, utc_now
from shared.exceptions import ValidationError
from shared.kv_store import IKeyValueStore
from modules.couples.interfaces import ICoupleService
from modules.couples.models import Slot

from .interfaces import IPulseService
from .models import GalleryEntry, PulseUpdate, Reaction, TodayCard
from .exceptions import TodayCardNotFoundError

logger = logging.getLogger(__name__)

# Fields that keep a gallery next to their latest value
GALLERY_FIELDS = ("mood", "message", "doodle")


def card_key(couple_id: str, date: str) -> str:
    return f"today:{couple_id}:{date}"


def card_prefix(couple_id: str) -> str:
    return f"today:{couple_id}:"


def apply_update(
    card: TodayCard,
    slot: Slot,
    user_id: str,
    update: PulseUpdate,
    now,
) -> TodayCard:
    """
    Apply a partner's update to their slot of the card, in place.

    Only ``{slot}_*`` fields and the shared metadata are written.
    """
    prefix = slot.value
    for field in GALLERY_FIELDS:
        value = getattr(update, field)
        if value is None:
            continue
        entry = GalleryEntry(
            value=value,
            timestamp=now,
            user_id=user_id,
            intensity=update.intensity if field == "mood" else None,
        )
        getattr(card, f"{prefix}_{field}_gallery").append(entry)
        setattr(card, f"{prefix}_{field}", value)

    if update.intensity is not None:
        setattr(card, f"{prefix}_intensity", update.intensity)

    setattr(card, f"{prefix}_updated_at", now)
    card.updated_by = user_id
    card.updated_at = now
    return card


class PulseService(IPulseService):
    """Today Card ledger over the key-value store."""

    def __init__(
        self,
        store: IKeyValueStore,
        couples: ICoupleService,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._couples = couples
        self._clock = clock

    def _load(self, couple_id: str, date: str) -> Optional[TodayCard]:
        doc = self._store.get(card_key(couple_id, date))
        return TodayCard.model_validate(doc) if doc is not None else None

    def _save(self, card: TodayCard) -> None:
        self._store.set(card_key(card.couple_id, card.date), card.to_document())

    async def get_today(self, couple_id: str) -> Optional[TodayCard]:
        if not couple_id:
            return None
        return self._load(couple_id, utc_date(self._clock()))

    async def update_today(
        self,
        couple_id: str,
        user_id: str,
        update: PulseUpdate,
    ) -> TodayCard:
        if update.is_empty():
            raise ValidationError("Nothing to update", code="MISSING_FIELDS")
        _, slot = await self._couples.resolve_slot(couple_id, user_id)

        now = self._clock()
        today = utc_date(now)
        card = self._load(couple_id, today) or TodayCard(couple_id=couple_id, date=today)

        apply_update(card, slot, user_id, update, now)
        self._save(card)
        logger.debug("Updated %s slot of card %s/%s", slot.value, couple_id, today)
        return card

    async def add_reaction(self, couple_id: str, user_id: str, emoji: str) -> TodayCard:
        if not emoji:
            raise ValidationError("Emoji is required", code="MISSING_FIELDS")
        await self._couples.resolve_slot(couple_id, user_id)

        now = self._clock()
        today = utc_date(now)
        card = self._load(couple_id, today)
        if card is None:
            raise TodayCardNotFoundError(couple_id, today)

        card.reactions.append(Reaction(user_id=user_id, emoji=emoji, timestamp=now))
        self._save(card)
        return card

    async def get_history(self, couple_id: str) -> list[TodayCard]:
        cards = [
            TodayCard.model_validate(doc)
            for doc in self._store.get_by_prefix(card_prefix(couple_id))
        ]
        return sorted(cards, key=lambda card: card.date, reverse=True)
