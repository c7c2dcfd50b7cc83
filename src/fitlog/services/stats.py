"""Workout statistics over a trailing window of days."""

from collections.abc import Callable
from datetime import datetime, timedelta

from ..core.logging import get_logger
from ..db.base import LogStore
from ..models.workout_log import WorkoutStats

logger = get_logger(__name__)

SESSIONS_PER_WEEK = 3


class StatsAggregator:
    """Computes ``WorkoutStats`` from whatever a ``LogStore`` returns.

    Read-only: it never writes to the store, so two calls with no writes in
    between give identical results (given the same clock reading).
    """

    def __init__(
        self,
        store: LogStore,
        clock: Callable[[], datetime] = datetime.now,
        sessions_per_week: int = SESSIONS_PER_WEEK,
    ):
        self.store = store
        self.clock = clock
        self.sessions_per_week = sessions_per_week

    def expected_workouts(self, window_days: int) -> int:
        """Target session count for the window, counted in whole weeks."""
        return (window_days // 7) * self.sessions_per_week

    async def compute_stats(self, user_id: int, window_days: int = 30) -> WorkoutStats:
        """Aggregate the user's logs in ``[now - window_days, now]``.

        ``window_days`` must already be a positive integer.

        Args:
            user_id: Owner of the logs
            window_days: Length of the trailing window

        Returns:
            The aggregate; all zeros and no last date when the window is empty
        """
        end_date = self.clock()
        try:
            start_date = end_date - timedelta(days=window_days)
        except OverflowError:
            # window reaches past datetime.min, so every log up to now counts
            start_date = None

        logs = await self.store.list_logs(user_id, start_date, end_date)

        if not logs:
            logger.debug("stats_computed", user_id=user_id, window_days=window_days, total_workouts=0)
            return WorkoutStats.empty()

        total_workouts = len(logs)
        total_water_intake = sum(log.water_intake for log in logs)
        total_duration = sum(log.duration for log in logs)
        average_water = total_water_intake / total_workouts

        expected = self.expected_workouts(window_days)
        if expected == 0:
            completion = 0
        else:
            completion = min(100, total_workouts / expected * 100)

        stats = WorkoutStats(
            total_workouts=total_workouts,
            total_water_intake=total_water_intake,
            total_duration=total_duration,
            average_water_per_workout=average_water,
            completion_percentage=completion,
            # logs come back newest first
            last_workout_date=logs[0].date,
        )
        logger.debug(
            "stats_computed",
            user_id=user_id,
            window_days=window_days,
            total_workouts=total_workouts,
            expected_workouts=expected,
        )
        return stats
