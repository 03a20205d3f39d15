"""
Error kinds raised by the item store and dashboard aggregator.

Routes translate these into HTTP status codes; nothing here knows about HTTP.
"""


class TrackerError(Exception):
    """Base exception for expense tracker errors."""
    pass


class ValidationError(TrackerError):
    """Raised when input is well-formed JSON but breaks a data-model rule."""
    pass


class NotFoundError(TrackerError):
    """Raised when a point lookup matches no row."""
    pass


class PersistenceError(TrackerError):
    """Raised on any storage failure: connectivity, constraint violation, bad SQL."""

    def __init__(self, message: str, query: str | None = None):
        super().__init__(message)
        self.query = query
