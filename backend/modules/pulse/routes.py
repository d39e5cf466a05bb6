"""
Today Card API endpoints.

``router`` is mounted at /today and ``history_router`` at /history.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_notification_service, get_pulse_service
from modules.notifications.interfaces import INotificationService

from .interfaces import IPulseService
from .models import (
    HistoryResponse,
    PulseUpdate,
    ReactRequest,
    TodayCardResponse,
    UpdateTodayRequest,
)

router = APIRouter()
history_router = APIRouter()


@router.get("/{couple_id}", response_model=TodayCardResponse)
async def get_today(
    couple_id: str,
    service: IPulseService = Depends(get_pulse_service),
) -> TodayCardResponse:
    """Get today's card; ``todayCard`` is null until someone writes."""
    card = await service.get_today(couple_id)
    return TodayCardResponse(today_card=card)


@router.post("/{couple_id}", response_model=TodayCardResponse)
async def update_today(
    couple_id: str,
    request: UpdateTodayRequest,
    service: IPulseService = Depends(get_pulse_service),
    notifications: INotificationService = Depends(get_notification_service),
) -> TodayCardResponse:
    """
    Update the caller's mood, intensity, message or doodle for today.

    With ``notifyPartner`` set, the partner is notified per field sent.
    """
    update = PulseUpdate(
        mood=request.mood,
        intensity=request.intensity,
        message=request.message,
        doodle=request.doodle,
    )
    card = await service.update_today(couple_id, request.user_id, update)
    if request.notify_partner:
        await notifications.notify_pulse_update(couple_id, request.user_id, update)
    return TodayCardResponse(today_card=card)


@router.post("/{couple_id}/react", response_model=TodayCardResponse)
async def react(
    couple_id: str,
    request: ReactRequest,
    service: IPulseService = Depends(get_pulse_service),
) -> TodayCardResponse:
    card = await service.add_reaction(couple_id, request.user_id, request.emoji)
    return TodayCardResponse(today_card=card)


@history_router.get("/{couple_id}", response_model=HistoryResponse)
async def get_history(
    couple_id: str,
    service: IPulseService = Depends(get_pulse_service),
) -> HistoryResponse:
    """Every day card for the couple, newest first."""
    return HistoryResponse(history=await service.get_history(couple_id))
