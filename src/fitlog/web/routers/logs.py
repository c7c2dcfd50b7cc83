"""Workout log routes."""

from fastapi import APIRouter, Body, Depends, Query

from ...services.logs import WorkoutLogService
from ..deps import current_user_id, get_log_service

router = APIRouter(prefix="/api/logs", tags=["logs"])


@router.post("", status_code=201)
async def create_log(
    body: dict = Body(...),
    user_id: int = Depends(current_user_id),
    service: WorkoutLogService = Depends(get_log_service),
):
    """Log a training session for the caller."""
    log = await service.create_log(user_id, body)
    return log.to_dict()


@router.get("")
async def list_logs(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    user_id: int = Depends(current_user_id),
    service: WorkoutLogService = Depends(get_log_service),
):
    """The caller's logs, newest first, optionally bounded by date."""
    logs = await service.list_logs(user_id, start_date, end_date)
    return [log.to_dict() for log in logs]
