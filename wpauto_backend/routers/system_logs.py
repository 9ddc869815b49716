"""
System log intake.
"""
from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy.orm import Session

from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.system_log import SystemLogCreate, SystemLogResponse
from wpauto_backend.services.system_log_service import SystemLogService

router = APIRouter()


@router.post("", response_model=SystemLogResponse, status_code=201)
async def create_system_log(
    request: SystemLogCreate,
    x_user_id: str = Header(None, alias="X-User-ID"),
    db: Session = Depends(get_db)
):
    """Store a log entry sent by the dashboard or a workflow."""
    if not request.level or not request.message or not request.source:
        raise HTTPException(status_code=400, detail="Missing required fields: level, message, source")

    entry = SystemLogService(db).record(
        request.level,
        request.message,
        source=request.source,
        user_id=x_user_id or None,
        metadata=request.metadata,
        details=request.details
    )
    if entry is None:
        raise HTTPException(status_code=500, detail="Failed to write system log")
    return entry
