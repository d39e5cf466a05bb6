"""
Notification and push subscription API endpoints.

``router`` is mounted at /notifications and ``push_router`` at /push.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_notification_service, get_push_sender
from shared.config import get_settings
from shared.models import SuccessResponse

from .interfaces import INotificationService
from .push import IPushSender
from .models import (
    DoodlePayload,
    DoodleUpdateRequest,
    MessagePayload,
    MessageUpdateRequest,
    MoodPayload,
    MoodUpdateRequest,
    NotificationListResponse,
    NotificationResponse,
    NudgePayload,
    SendRequest,
    SubscribeRequest,
    UnsubscribeRequest,
    VapidKeyResponse,
)

router = APIRouter()
push_router = APIRouter()


@router.post("/nudge", response_model=NotificationResponse)
async def send_nudge(
    request: SendRequest,
    service: INotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    """Nudge the partner to share how they are doing."""
    notification = await service.notify(request.couple_id, request.sender_id, NudgePayload())
    return NotificationResponse(notification=notification)


@router.post("/mood-update", response_model=NotificationResponse)
async def send_mood_update(
    request: MoodUpdateRequest,
    service: INotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    notification = await service.notify(
        request.couple_id,
        request.sender_id,
        MoodPayload(mood=request.mood, intensity=request.intensity),
    )
    return NotificationResponse(notification=notification)


@router.post("/message-update", response_model=NotificationResponse)
async def send_message_update(
    request: MessageUpdateRequest,
    service: INotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    notification = await service.notify(
        request.couple_id,
        request.sender_id,
        MessagePayload(message=request.message),
    )
    return NotificationResponse(notification=notification)


@router.post("/doodle-update", response_model=NotificationResponse)
async def send_doodle_update(
    request: DoodleUpdateRequest,
    service: INotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    notification = await service.notify(
        request.couple_id,
        request.sender_id,
        DoodlePayload(doodle=request.doodle),
    )
    return NotificationResponse(notification=notification)


@router.get("/{user_id}", response_model=NotificationListResponse)
async def list_notifications(
    user_id: str,
    service: INotificationService = Depends(get_notification_service),
) -> NotificationListResponse:
    """
    List every notification addressed to the user, newest first.

    Unread filtering is left to the client.
    """
    notifications = await service.list_for(user_id)
    return NotificationListResponse(notifications=notifications)


@router.post("/{notification_id}/read", response_model=SuccessResponse)
async def mark_read(
    notification_id: str,
    service: INotificationService = Depends(get_notification_service),
) -> SuccessResponse:
    await service.mark_read(notification_id)
    return SuccessResponse()


@push_router.get("/vapid-public-key", response_model=VapidKeyResponse)
async def vapid_public_key() -> VapidKeyResponse:
    """Public VAPID key the browser needs to create a subscription."""
    return VapidKeyResponse(public_key=get_settings().vapid_public_key)


@push_router.post("/subscribe", response_model=SuccessResponse)
async def subscribe(
    request: SubscribeRequest,
    push: IPushSender = Depends(get_push_sender),
) -> SuccessResponse:
    push.subscribe(request.user_id, request.subscription)
    return SuccessResponse()


@push_router.post("/unsubscribe", response_model=SuccessResponse)
async def unsubscribe(
    request: UnsubscribeRequest,
    push: IPushSender = Depends(get_push_sender),
) -> SuccessResponse:
    push.unsubscribe(request.user_id)
    return SuccessResponse()
