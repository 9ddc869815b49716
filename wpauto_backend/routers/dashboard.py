"""
Dashboard endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from wpauto_backend.core.security import get_current_user_id
from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.dashboard import ActivityResponse, DashboardStats
from wpauto_backend.services.activity_service import ActivityService
from wpauto_backend.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_stats(
    time_range: str = "7d",
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return DashboardService(db).get_stats(time_range)


@router.get("/activity", response_model=List[ActivityResponse])
async def get_recent_activity(
    limit: int = Query(10, ge=1, le=100),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return ActivityService(db).recent(user_id, limit)
