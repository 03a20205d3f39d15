from fastapi import HTTPException

from exceptions import TrackerError, ValidationError, NotFoundError


def to_http_error(e: TrackerError) -> HTTPException:
    """Map a store/aggregator error onto the status the client sees."""
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ValidationError):
        return HTTPException(status_code=422, detail=str(e))
    return HTTPException(status_code=500, detail="Internal server error")
