"""
Pairing and couple API endpoints.

Two routers are exported: ``pairing_router`` (mounted at /pairing) and
``couples_router`` (mounted at /couples).
"""

from typing import Union

from fastapi import APIRouter, Depends

from api.dependencies import get_couple_service
from shared.models import SuccessResponse

from .interfaces import ICoupleService
from .models import (
    CoupleView,
    GenerateCodeRequest,
    GenerateCodeResponse,
    JoinRequest,
    JoinResponse,
    NoCodeResponse,
    NoCoupleResponse,
    PairingCode,
)

pairing_router = APIRouter()
couples_router = APIRouter()


@pairing_router.post("/generate", response_model=GenerateCodeResponse)
async def generate_code(
    request: GenerateCodeRequest,
    service: ICoupleService = Depends(get_couple_service),
) -> GenerateCodeResponse:
    """Issue a 6-digit pairing code valid for 15 minutes."""
    code = await service.generate_code(request.user_id)
    return GenerateCodeResponse(code=code.code, expires_at=code.expires_at)


@pairing_router.post("/join", response_model=JoinResponse)
async def join_with_code(
    request: JoinRequest,
    service: ICoupleService = Depends(get_couple_service),
) -> JoinResponse:
    """Redeem a partner's pairing code."""
    return await service.join_with_code(request.user_id, request.code)


@pairing_router.get("/{user_id}", response_model=Union[PairingCode, NoCodeResponse])
async def get_current_code(
    user_id: str,
    service: ICoupleService = Depends(get_couple_service),
) -> Union[PairingCode, NoCodeResponse]:
    """Get the user's most recently issued pairing code."""
    code = await service.get_current_code(user_id)
    return code if code is not None else NoCodeResponse()


@couples_router.get("/{user_id}", response_model=Union[CoupleView, NoCoupleResponse])
async def get_couple(
    user_id: str,
    service: ICoupleService = Depends(get_couple_service),
) -> Union[CoupleView, NoCoupleResponse]:
    """Get the user's couple and partner, or ``{"couple": null}``."""
    couple = await service.get_couple(user_id)
    return couple if couple is not None else NoCoupleResponse()


@couples_router.delete("/{user_id}", response_model=SuccessResponse)
async def unpair(
    user_id: str,
    service: ICoupleService = Depends(get_couple_service),
) -> SuccessResponse:
    """Dissolve the user's couple."""
    await service.unpair(user_id)
    return SuccessResponse()
