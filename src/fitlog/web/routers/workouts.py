"""Training plan routes."""

from fastapi import APIRouter, Depends, File, UploadFile

from ...core.config import settings
from ...services.workouts import WorkoutService
from ..deps import current_user_id, get_workout_service
from ..schemas import WorkoutCreate, WorkoutDayCreate

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@router.get("")
async def list_workouts(
    user_id: int = Depends(current_user_id),
    service: WorkoutService = Depends(get_workout_service),
):
    """List the caller's plans."""
    return [w.to_dict() for w in await service.list_for_user(user_id)]


@router.post("", status_code=201)
async def create_workout(
    body: WorkoutCreate,
    user_id: int = Depends(current_user_id),
    service: WorkoutService = Depends(get_workout_service),
):
    """Create a plan."""
    workout = await service.create(user_id, body.name)
    return workout.to_dict()


@router.get("/{workout_id}")
async def get_workout(
    workout_id: int,
    user_id: int = Depends(current_user_id),
    service: WorkoutService = Depends(get_workout_service),
):
    workout = await service.get(user_id, workout_id)
    return workout.to_dict()


@router.get("/{workout_id}/days")
async def list_days(
    workout_id: int,
    user_id: int = Depends(current_user_id),
    service: WorkoutService = Depends(get_workout_service),
):
    """Days of a plan in order."""
    return [d.to_dict() for d in await service.list_days(user_id, workout_id)]


@router.post("/{workout_id}/days", status_code=201)
async def add_day(
    workout_id: int,
    body: WorkoutDayCreate,
    user_id: int = Depends(current_user_id),
    service: WorkoutService = Depends(get_workout_service),
):
    """Append a day to a plan."""
    day = await service.add_day(
        user_id,
        workout_id,
        body.day,
        body.name,
        [e.model_dump() for e in body.exercises],
    )
    return day.to_dict()


@router.post("/{workout_id}/csv")
async def upload_plan(
    workout_id: int,
    csv: UploadFile = File(...),
    user_id: int = Depends(current_user_id),
    service: WorkoutService = Depends(get_workout_service),
):
    """Replace a plan's days with an uploaded CSV spreadsheet."""
    # one byte past the limit is enough for the size check to reject it
    content = await csv.read(settings.max_upload_bytes + 1)
    workout, days = await service.import_plan_csv(
        user_id,
        workout_id,
        filename=csv.filename,
        content=content,
        content_type=csv.content_type,
    )
    result = workout.to_dict()
    result["days"] = [d.to_dict() for d in days]
    return result
