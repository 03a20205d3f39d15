from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from exceptions import TrackerError
from routes.errors import to_http_error
from routes.params import user_id_filter
from services.dashboard_service import DashboardAggregator

router = APIRouter(prefix="/api/v1", tags=["Dashboard"])


@router.get("/dashboard-data")
def dashboard_data(user_id: Optional[int] = Depends(user_id_filter), db: Session = Depends(get_db)):
    try:
        data = DashboardAggregator.get_dashboard(db, user_id)
        return {"message": "ok", "data": data}
    except TrackerError as e:
        raise to_http_error(e) from e
