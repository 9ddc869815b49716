"""
Scheduled article endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from wpauto_backend.core.security import get_current_user_id
from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.article import ArticleResponse
from wpauto_backend.schemas.orchestration import ProcessDueResponse
from wpauto_backend.services.article_service import ArticleService
from wpauto_backend.services.processing_service import ArticleProcessingService

router = APIRouter()


@router.post("/process", response_model=ProcessDueResponse)
async def process_scheduled_articles(db: Session = Depends(get_db)):
    """Trigger every scheduled article that is due (manual trigger for testing)."""
    service = ArticleProcessingService(db)
    result = await service.process_due_articles()
    return ProcessDueResponse(**result)


@router.get("", response_model=List[ArticleResponse])
async def list_upcoming(
    days: int = Query(7, ge=1, le=365),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Scheduled articles due within the next ``days`` days."""
    return ArticleService(db).upcoming_scheduled(user_id, days)
