"""
Challenge API endpoints (mounted at /challenges).

Weekly challenge:
    GET  /current/{couple_id}
    POST /complete
    GET  /history/{couple_id}

Daily question:
    GET  /daily/current/{couple_id}
    POST /daily/answer
    GET  /daily/history/{couple_id}
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_daily_challenge_service, get_weekly_challenge_service

from .interfaces import IDailyChallengeService, IWeeklyChallengeService
from .models import (
    AnswerQuestionRequest,
    CompleteChallengeRequest,
    DailyChallengeResponse,
    DailyHistoryResponse,
    WeeklyChallengeResponse,
    WeeklyHistoryResponse,
)

router = APIRouter()


@router.get("/current/{couple_id}", response_model=WeeklyChallengeResponse)
async def get_current_challenge(
    couple_id: str,
    service: IWeeklyChallengeService = Depends(get_weekly_challenge_service),
) -> WeeklyChallengeResponse:
    """Get this week's shared challenge."""
    return WeeklyChallengeResponse(challenge=await service.get_current(couple_id))


@router.post("/complete", response_model=WeeklyChallengeResponse)
async def complete_challenge(
    request: CompleteChallengeRequest,
    service: IWeeklyChallengeService = Depends(get_weekly_challenge_service),
) -> WeeklyChallengeResponse:
    """
    Mark the caller's half of this week's challenge as done.

    ``justCompleted`` is true only for the partner who completes it second.
    """
    challenge, just_completed = await service.complete(
        request.couple_id,
        request.user_id,
        request.response,
    )
    return WeeklyChallengeResponse(challenge=challenge, just_completed=just_completed)


@router.get("/history/{couple_id}", response_model=WeeklyHistoryResponse)
async def get_challenge_history(
    couple_id: str,
    service: IWeeklyChallengeService = Depends(get_weekly_challenge_service),
) -> WeeklyHistoryResponse:
    history, stats = await service.get_history(couple_id)
    return WeeklyHistoryResponse(history=history, stats=stats)


@router.get("/daily/current/{couple_id}", response_model=DailyChallengeResponse)
async def get_current_question(
    couple_id: str,
    service: IDailyChallengeService = Depends(get_daily_challenge_service),
) -> DailyChallengeResponse:
    return DailyChallengeResponse(challenge=await service.get_current(couple_id))


@router.post("/daily/answer", response_model=DailyChallengeResponse)
async def answer_question(
    request: AnswerQuestionRequest,
    service: IDailyChallengeService = Depends(get_daily_challenge_service),
) -> DailyChallengeResponse:
    challenge, just_completed = await service.answer(
        request.couple_id,
        request.user_id,
        request.answer,
    )
    return DailyChallengeResponse(challenge=challenge, just_completed=just_completed)


@router.get("/daily/history/{couple_id}", response_model=DailyHistoryResponse)
async def get_question_history(
    couple_id: str,
    service: IDailyChallengeService = Depends(get_daily_challenge_service),
) -> DailyHistoryResponse:
    history, stats = await service.get_history(couple_id)
    return DailyHistoryResponse(history=history, stats=stats)
