"""Error kinds raised by services and repositories."""


class FitlogError(Exception):
    """Base class for all fitlog errors."""


class ValidationError(FitlogError):
    """Malformed or out-of-range input.

    ``errors`` holds one ``{"field": ..., "message": ...}`` entry per
    offending field.
    """

    def __init__(self, errors: list[dict]):
        self.errors = errors
        summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        super().__init__(summary or "invalid input")

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([{"field": field, "message": message}])


class NotFoundError(FitlogError):
    """A referenced user, workout or day does not exist."""


class StorageError(FitlogError):
    """Persistence failed. Not retried; callers see it as a transient failure."""
