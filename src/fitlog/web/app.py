"""FastAPI application for the fitlog JSON API and dashboard."""

from collections.abc import Callable
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..core.config import settings
from ..core.errors import NotFoundError, StorageError, ValidationError
from ..core.logging import get_logger, setup_logging
from ..db.base import LogStore
from ..db.engine import get_db_path, init_db
from ..db.memory import MemoryLogStore
from ..db.repositories import WorkoutLogRepository
from .routers import dashboard, logs, stats, users, workouts

TEMPLATES_DIR = Path(__file__).parent / "templates"

logger = get_logger(__name__)


def create_app(
    db_path: Path | None = None,
    log_store: LogStore | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: sqlite file for users, plans and (by default) logs
        log_store: Overrides the configured log backend
        clock: Current-time source for log defaults and stats windows
    """
    db_path = db_path or get_db_path()
    if log_store is None:
        if settings.storage_backend == "memory":
            log_store = MemoryLogStore(clock=clock)
        else:
            log_store = WorkoutLogRepository(db_path, clock=clock)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize logging and the schema on startup."""
        setup_logging()
        await init_db(db_path)
        logger.info("fitlog_started", version=__version__, backend=type(log_store).__name__)
        yield
        logger.info("fitlog_stopped")

    app = FastAPI(
        title="fitlog",
        description="Workout log with hydration, duration and completion statistics",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.db_path = db_path
    app.state.log_store = log_store
    app.state.clock = clock
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"errors": exc.errors})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        return JSONResponse(
            status_code=503, content={"detail": "Storage temporarily unavailable"}
        )

    app.include_router(users.router)
    app.include_router(workouts.router)
    app.include_router(logs.router)
    app.include_router(stats.router)
    app.include_router(dashboard.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
