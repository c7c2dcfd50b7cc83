"""Cross-cutting configuration, logging and error types."""

from .config import Settings, settings
from .errors import FitlogError, NotFoundError, StorageError, ValidationError
from .logging import get_logger, setup_logging

__all__ = [
    "FitlogError",
    "get_logger",
    "NotFoundError",
    "Settings",
    "settings",
    "setup_logging",
    "StorageError",
    "ValidationError",
]
