"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite

from ..core.config import settings
from ..core.logging import get_logger

logger = get_logger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = settings.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.db_filename


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                username TEXT UNIQUE NOT NULL,
                full_name TEXT,
                age INTEGER,
                weight INTEGER NOT NULL DEFAULT 70000,
                height INTEGER NOT NULL DEFAULT 170,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Training plans
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                plan_filename TEXT,
                FOREIGN KEY (user_id) REFERENCES users(id)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_days (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_id INTEGER NOT NULL,
                day TEXT NOT NULL,
                name TEXT NOT NULL,
                exercises TEXT NOT NULL DEFAULT '[]',
                FOREIGN KEY (workout_id) REFERENCES workouts(id) ON DELETE CASCADE
            )
        """)

        # date is stored as a fixed-width ISO-8601 string so text order is time order
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                workout_id INTEGER,
                date TEXT NOT NULL,
                completed_exercises INTEGER NOT NULL DEFAULT 0,
                water_intake INTEGER NOT NULL DEFAULT 0,
                duration INTEGER NOT NULL DEFAULT 0,
                notes TEXT,
                FOREIGN KEY (user_id) REFERENCES users(id),
                FOREIGN KEY (workout_id) REFERENCES workouts(id) ON DELETE SET NULL
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_user
            ON workouts(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_days_workout
            ON workout_days(workout_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_logs_user_date
            ON workout_logs(user_id, date)
        """)

        await db.commit()

    logger.info("database_initialized", db_path=str(db_path))
