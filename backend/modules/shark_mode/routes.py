"""
Shark mode API endpoints (mounted at /shark-mode).
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_shark_mode_service

from .interfaces import ISharkModeService
from .models import (
    ActivateRequest,
    DeactivateRequest,
    ExtendRequest,
    ReassuranceRequest,
    SharkModeHistoryResponse,
    SharkModeResponse,
    SharkModeStatusResponse,
    UpdateNoteRequest,
)

router = APIRouter()


@router.post("/activate", response_model=SharkModeResponse)
async def activate(
    request: ActivateRequest,
    service: ISharkModeService = Depends(get_shark_mode_service),
) -> SharkModeResponse:
    """
    Start shark mode for the caller.

    Returns 400 for a duration outside 1-7 days and 409 if one is already
    active for the couple.
    """
    record = await service.activate(
        request.couple_id,
        request.user_id,
        request.duration_days,
        request.note,
    )
    return SharkModeResponse(shark_mode=record)


@router.post("/extend", response_model=SharkModeResponse)
async def extend(
    request: ExtendRequest,
    service: ISharkModeService = Depends(get_shark_mode_service),
) -> SharkModeResponse:
    record = await service.extend(request.couple_id, request.user_id, request.additional_days)
    return SharkModeResponse(shark_mode=record)


@router.post("/deactivate", response_model=SharkModeResponse)
async def deactivate(
    request: DeactivateRequest,
    service: ISharkModeService = Depends(get_shark_mode_service),
) -> SharkModeResponse:
    record = await service.deactivate(request.couple_id, request.user_id)
    return SharkModeResponse(shark_mode=record)


@router.post("/update-note", response_model=SharkModeResponse)
async def update_note(
    request: UpdateNoteRequest,
    service: ISharkModeService = Depends(get_shark_mode_service),
) -> SharkModeResponse:
    record = await service.update_note(request.couple_id, request.user_id, request.note)
    return SharkModeResponse(shark_mode=record)


@router.post("/reassurance", response_model=SharkModeResponse)
async def send_reassurance(
    request: ReassuranceRequest,
    service: ISharkModeService = Depends(get_shark_mode_service),
) -> SharkModeResponse:
    """Partner-only reassurance message attached to the active record."""
    record = await service.send_reassurance(
        request.couple_id,
        request.user_id,
        request.reassurance,
    )
    return SharkModeResponse(shark_mode=record)


@router.get("/status/{couple_id}", response_model=SharkModeStatusResponse)
async def get_status(
    couple_id: str,
    service: ISharkModeService = Depends(get_shark_mode_service),
) -> SharkModeStatusResponse:
    record = await service.get_status(couple_id)
    return SharkModeStatusResponse(shark_mode=record, active=record is not None)


@router.get("/history/{couple_id}", response_model=SharkModeHistoryResponse)
async def get_history(
    couple_id: str,
    service: ISharkModeService = Depends(get_shark_mode_service),
) -> SharkModeHistoryResponse:
    return SharkModeHistoryResponse(history=await service.get_history(couple_id))
