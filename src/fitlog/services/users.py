"""User registration and body measurements."""

from ..core.errors import NotFoundError, ValidationError
from ..core.logging import get_logger
from ..db.repositories import UserRepository
from ..models.user import DEFAULT_HEIGHT_CM, DEFAULT_WEIGHT_GRAMS, User

logger = get_logger(__name__)

WEIGHT_RANGE_GRAMS = (30_000, 300_000)
HEIGHT_RANGE_CM = (100, 250)
AGE_RANGE = (12, 100)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_stats(weight, height, full_name=None, age=None) -> None:
    """Check body measurements against the accepted ranges.

    Raises:
        ValidationError: listing every field that is out of range
    """
    errors = []
    if not _is_int(weight) or not WEIGHT_RANGE_GRAMS[0] <= weight <= WEIGHT_RANGE_GRAMS[1]:
        errors.append({"field": "weight", "message": "must be between 30000 g and 300000 g"})
    if not _is_int(height) or not HEIGHT_RANGE_CM[0] <= height <= HEIGHT_RANGE_CM[1]:
        errors.append({"field": "height", "message": "must be between 100 cm and 250 cm"})
    if full_name is not None and (not isinstance(full_name, str) or not full_name.strip()):
        errors.append({"field": "fullName", "message": "must be a non-empty string"})
    if age is not None and (not _is_int(age) or not AGE_RANGE[0] <= age <= AGE_RANGE[1]):
        errors.append({"field": "age", "message": "must be between 12 and 100"})
    if errors:
        raise ValidationError(errors)


class UserService:
    """Register users and maintain their profile measurements."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def register(
        self,
        username: str,
        full_name: str | None = None,
        age: int | None = None,
        weight: int | None = None,
        height: int | None = None,
    ) -> User:
        """Create a user. Unset weight/height get the 70 kg / 170 cm defaults."""
        username = (username or "").strip()
        if not username:
            raise ValidationError.single("username", "must not be empty")
        if await self.users.get_by_username(username) is not None:
            raise ValidationError.single("username", f"{username!r} is already taken")

        user = User(
            username=username,
            full_name=full_name or None,
            age=age or None,
            weight=weight or DEFAULT_WEIGHT_GRAMS,
            height=height or DEFAULT_HEIGHT_CM,
        )
        validate_stats(user.weight, user.height, user.full_name, user.age)

        created = await self.users.create(user)
        logger.info("user_registered", user_id=created.id, username=created.username)
        return created

    async def get(self, user_id: int) -> User:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    async def update_stats(
        self,
        user_id: int,
        weight: int,
        height: int,
        full_name: str | None = None,
        age: int | None = None,
    ) -> User:
        """Replace weight and height; name and age only change when given."""
        validate_stats(weight, height, full_name, age)
        user = await self.users.update_stats(user_id, weight, height, full_name, age)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user
