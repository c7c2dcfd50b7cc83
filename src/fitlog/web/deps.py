"""Request-scoped dependencies shared by the routers."""

from fastapi import Header, HTTPException, Request

from ..db.repositories import UserRepository, WorkoutDayRepository, WorkoutRepository
from ..services.logs import MAX_ID, WorkoutLogService
from ..services.users import UserService
from ..services.workouts import WorkoutService


def current_user_id(x_user_id: str | None = Header(default=None)) -> int:
    """Identity of the caller, taken from the ``X-User-Id`` header."""
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        user_id = int(x_user_id)
    except ValueError:
        raise HTTPException(status_code=401, detail="Not authenticated") from None
    if not 1 <= user_id <= MAX_ID:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id


def get_user_service(request: Request) -> UserService:
    return UserService(UserRepository(request.app.state.db_path))


def get_workout_service(request: Request) -> WorkoutService:
    db_path = request.app.state.db_path
    return WorkoutService(
        WorkoutRepository(db_path),
        WorkoutDayRepository(db_path),
        UserRepository(db_path),
    )


def get_log_service(request: Request) -> WorkoutLogService:
    db_path = request.app.state.db_path
    return WorkoutLogService(
        request.app.state.log_store,
        users=UserRepository(db_path),
        workouts=WorkoutRepository(db_path),
        clock=request.app.state.clock,
    )


def get_templates(request: Request):
    """Get templates from app state."""
    return request.app.state.templates
