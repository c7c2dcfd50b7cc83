"""Workout statistics route."""

from fastapi import APIRouter, Depends, Query

from ...services.logs import WorkoutLogService
from ..deps import current_user_id, get_log_service

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("")
async def get_stats(
    days: str | None = Query(default=None),
    user_id: int = Depends(current_user_id),
    service: WorkoutLogService = Depends(get_log_service),
):
    """Aggregates over the last ``days`` days (30 when missing or invalid)."""
    stats = await service.get_stats(user_id, days)
    return stats.to_dict()
