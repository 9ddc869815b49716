"""
Manual trigger of an article's n8n webhook.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.orchestration import ForceProcessRequest
from wpauto_backend.services.processing_service import ArticleProcessingService, ProcessingError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def force_process(
    request: Optional[ForceProcessRequest] = None,
    db: Session = Depends(get_db)
):
    """
    Send one article to its webhook immediately.

    Without ``articleId`` the newest pending article that has a webhook is used.
    """
    article_id = request.article_id if request else None
    service = ArticleProcessingService(db)

    try:
        data = await service.force_process(article_id)
    except ProcessingError as e:
        return JSONResponse(status_code=e.status_code, content={"success": False, "error": e.message})

    return {
        "success": True,
        "message": "Article processed successfully",
        "data": data
    }
