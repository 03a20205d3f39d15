from typing import Optional

from fastapi import HTTPException, Query


def user_id_filter(user_id: Optional[str] = Query(default=None)) -> Optional[int]:
    """FastAPI dependency: blank or missing user_id means every user."""
    if user_id is None or not user_id.strip():
        return None
    try:
        return int(user_id)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"user_id must be an integer, got '{user_id}'")
