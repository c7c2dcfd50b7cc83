"""User registration and profile routes."""

from fastapi import APIRouter, Depends

from ...services.users import UserService
from ..deps import current_user_id, get_user_service
from ..schemas import UserCreate, UserStatsUpdate

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/users", status_code=201)
async def register(
    body: UserCreate,
    service: UserService = Depends(get_user_service),
):
    """Register a new user."""
    user = await service.register(
        body.username,
        full_name=body.full_name,
        age=body.age,
        weight=body.weight,
        height=body.height,
    )
    return user.to_dict()


@router.get("/user")
async def current_user(
    user_id: int = Depends(current_user_id),
    service: UserService = Depends(get_user_service),
):
    """Profile of the calling user, including BMI."""
    user = await service.get(user_id)
    return user.to_dict()


@router.put("/user/stats")
async def update_stats(
    body: UserStatsUpdate,
    user_id: int = Depends(current_user_id),
    service: UserService = Depends(get_user_service),
):
    """Update weight, height and optionally name and age."""
    user = await service.update_stats(
        user_id, body.weight, body.height, full_name=body.full_name, age=body.age
    )
    return user.to_dict()
