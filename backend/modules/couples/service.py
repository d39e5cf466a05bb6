"""
Pairing and couple service implementation.

Key layout:
    code:{code}              -> PairingCode
    code:user:{userId}       -> PairingCode (issuer's current code)
    couple:{coupleId}        -> Couple
    couple:user:{userId}     -> coupleId

The store has no multi-key transactions, so redemption writes the couple
and both member indexes first and flips the code to USED last.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional

from shared.clock import Clock, generate_id, utc_now
from shared.config import get_settings
from shared.kv_store import IKeyValueStore
from modules.users.interfaces import IUserService

from .interfaces import ICoupleService
from .models import (
    CodeStatus,
    Couple,
    CoupleView,
    JoinResponse,
    PairingCode,
    Slot,
)
from .exceptions import (
    AlreadyPairedError,
    CoupleNotFoundError,
    InvalidCodeError,
    NotCoupleMemberError,
    SelfJoinError,
)

logger = logging.getLogger(__name__)


def code_key(code: str) -> str:
    return f"code:{code}"


def user_code_key(user_id: str) -> str:
    return f"code:user:{user_id}"


def couple_key(couple_id: str) -> str:
    return f"couple:{couple_id}"


def user_couple_key(user_id: str) -> str:
    return f"couple:user:{user_id}"


def random_code() -> str:
    """Uniform random 6-digit code (100000-999999)."""
    return str(100000 + secrets.randbelow(900000))


def effective_code_status(code: PairingCode, now: datetime) -> CodeStatus:
    """Status of a code at ``now``; an active code past expiry reads as expired."""
    if code.status == CodeStatus.ACTIVE and now > code.expires_at:
        return CodeStatus.EXPIRED
    return code.status


class CoupleService(ICoupleService):
    """Pairing and couple service over the key-value store."""

    def __init__(
        self,
        store: IKeyValueStore,
        users: IUserService,
        clock: Clock = utc_now,
        code_generator: Callable[[], str] = random_code,
        code_ttl: Optional[timedelta] = None,
    ):
        self._store = store
        self._users = users
        self._clock = clock
        self._code_generator = code_generator
        self._code_ttl = code_ttl or timedelta(
            minutes=get_settings().pairing_code_ttl_minutes
        )

    # -------------------------------------------------------------------------
    # Pairing codes
    # -------------------------------------------------------------------------

    def _load_code(self, code: str) -> Optional[PairingCode]:
        doc = self._store.get(code_key(code))
        return PairingCode.model_validate(doc) if doc is not None else None

    def _is_code_taken(self, code: str, now: datetime) -> bool:
        existing = self._load_code(code)
        return existing is not None and effective_code_status(existing, now) == CodeStatus.ACTIVE

    async def generate_code(self, user_id: str) -> PairingCode:
        await self._users.require_user(user_id)

        now = self._clock()
        code = self._code_generator()
        while self._is_code_taken(code, now):
            code = self._code_generator()

        pairing_code = PairingCode(
            code=code,
            user_id=user_id,
            created_at=now,
            expires_at=now + self._code_ttl,
            status=CodeStatus.ACTIVE,
        )
        document = pairing_code.to_document()
        self._store.set(code_key(code), document)
        self._store.set(user_code_key(user_id), document)
        logger.info("Issued pairing code for user %s", user_id)
        return pairing_code

    async def get_current_code(self, user_id: str) -> Optional[PairingCode]:
        doc = self._store.get(user_code_key(user_id))
        if doc is None:
            return None
        pointer = PairingCode.model_validate(doc)
        # The code record is authoritative for status; the pointer is a copy.
        current = self._load_code(pointer.code)
        if current is None or current.user_id != user_id:
            current = pointer
        return current.model_copy(
            update={"status": effective_code_status(current, self._clock())}
        )

    def _retire_code(self, user_id: str, now: datetime) -> None:
        """Expire a user's outstanding code once they are paired."""
        doc = self._store.get(user_code_key(user_id))
        if doc is None:
            return
        pointer = PairingCode.model_validate(doc)
        current = self._load_code(pointer.code)
        if current is None or current.user_id != user_id:
            return
        if effective_code_status(current, now) != CodeStatus.ACTIVE:
            return
        expired = current.model_copy(update={"status": CodeStatus.EXPIRED})
        self._store.set(code_key(current.code), expired.to_document())
        self._store.set(user_code_key(user_id), expired.to_document())

    async def join_with_code(self, user_id: str, code: str) -> JoinResponse:
        await self._users.require_user(user_id)

        if self._store.get(user_couple_key(user_id)) is not None:
            raise AlreadyPairedError(user_id)

        pairing_code = self._load_code(code)
        if pairing_code is None:
            raise InvalidCodeError("Invalid code", reason="unknown")

        now = self._clock()
        status = effective_code_status(pairing_code, now)
        if status == CodeStatus.EXPIRED:
            if pairing_code.status == CodeStatus.ACTIVE:
                expired = pairing_code.model_copy(update={"status": CodeStatus.EXPIRED})
                self._store.set(code_key(code), expired.to_document())
            raise InvalidCodeError("Code has expired", reason="expired")
        if status != CodeStatus.ACTIVE:
            raise InvalidCodeError("Code has already been used", reason=status.value)

        if pairing_code.user_id == user_id:
            raise SelfJoinError()
        if self._store.get(user_couple_key(pairing_code.user_id)) is not None:
            raise AlreadyPairedError(pairing_code.user_id)

        couple = Couple(
            couple_id=generate_id(),
            user1_id=pairing_code.user_id,
            user2_id=user_id,
            created_at=now,
        )
        self._store.set(couple_key(couple.couple_id), couple.to_document())
        self._store.set(user_couple_key(couple.user1_id), couple.couple_id)
        self._store.set(user_couple_key(couple.user2_id), couple.couple_id)

        used = pairing_code.model_copy(
            update={"status": CodeStatus.USED, "couple_id": couple.couple_id}
        )
        pointer = self._store.get(user_code_key(pairing_code.user_id))
        if pointer is not None and pointer.get("code") == code:
            self._store.set(user_code_key(pairing_code.user_id), used.to_document())
        self._store.set(code_key(code), used.to_document())
        self._retire_code(user_id, now)

        logger.info(
            "Paired users %s and %s as couple %s",
            couple.user1_id,
            couple.user2_id,
            couple.couple_id,
        )

        issuer = await self._users.require_user(pairing_code.user_id)
        return JoinResponse(couple_id=couple.couple_id, partner=issuer.to_public())

    # -------------------------------------------------------------------------
    # Couples
    # -------------------------------------------------------------------------

    def _load_couple(self, couple_id: str) -> Optional[Couple]:
        doc = self._store.get(couple_key(couple_id))
        return Couple.model_validate(doc) if doc is not None else None

    async def get_couple(self, user_id: str) -> Optional[CoupleView]:
        couple_id = self._store.get(user_couple_key(user_id))
        if couple_id is None:
            return None

        couple = self._load_couple(couple_id)
        if couple is None:
            logger.warning("Dangling couple index for user %s -> %s", user_id, couple_id)
            return None

        partner = await self._users.require_user(couple.partner_of(user_id))
        return CoupleView(
            couple_id=couple.couple_id,
            created_at=couple.created_at,
            user1_id=couple.user1_id,
            user2_id=couple.user2_id,
            partner=partner.to_public(),
        )

    async def unpair(self, user_id: str) -> None:
        couple_id = self._store.get(user_couple_key(user_id))
        if couple_id is None:
            raise CoupleNotFoundError(user_id)

        couple = self._load_couple(couple_id)
        if couple is not None:
            self._store.delete(user_couple_key(couple.user1_id))
            self._store.delete(user_couple_key(couple.user2_id))
        else:
            self._store.delete(user_couple_key(user_id))
        self._store.delete(couple_key(couple_id))
        logger.info("Unpaired couple %s", couple_id)

    async def get_couple_by_id(self, couple_id: str) -> Couple:
        couple = self._load_couple(couple_id)
        if couple is None:
            raise CoupleNotFoundError(couple_id)
        return couple

    async def resolve_slot(self, couple_id: str, user_id: str) -> tuple[Couple, Slot]:
        couple = await self.get_couple_by_id(couple_id)
        slot = couple.slot_of(user_id)
        if slot is None:
            raise NotCoupleMemberError(couple_id, user_id)
        return couple, slot
