"""
Callback endpoint for n8n workflow progress.
"""
import json
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from wpauto_backend.core.config import settings
from wpauto_backend.core.security import verify_hmac_signature
from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.orchestration import N8NCallback
from wpauto_backend.services.n8n_service import N8NCallbackService

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@router.post("")
async def receive_n8n_callback(
    request: Request,
    x_signature: str = Header(None, alias="X-Signature"),
    db: Session = Depends(get_db)
):
    """
    Apply an n8n progress update to its article.

    When ``N8N_WEBHOOK_SECRET`` is set the raw body must carry a matching
    HMAC-SHA256 ``X-Signature``.
    """
    raw_body = await request.body()

    if settings.N8N_WEBHOOK_SECRET and not verify_hmac_signature(
        raw_body, x_signature, settings.N8N_WEBHOOK_SECRET
    ):
        logger.warning("[N8N] Rejected callback with invalid signature")
        return _error(401, "Invalid signature")

    try:
        payload = json.loads(raw_body.decode("utf-8") or "{}")
        if not isinstance(payload, dict):
            raise ValueError("body must be a JSON object")
        callback = N8NCallback.model_validate(payload)
    except (ValueError, ValidationError) as e:
        return _error(400, f"Invalid payload: {e}")

    if callback.article_id is None or not callback.status:
        return _error(400, "Missing required fields: article_id, status")

    logger.info(f"[N8N] Callback for article {callback.article_id}: {callback.status}")

    data = await N8NCallbackService(db).update_article_progress(callback)
    if data is None:
        return _error(404, f"Article {callback.article_id} not found")

    return {
        "success": True,
        "message": f"Article {callback.article_id} updated successfully",
        "data": data
    }


@router.get("")
async def n8n_endpoint_status():
    """Liveness probe used when configuring the n8n workflow."""
    return {
        "success": True,
        "message": "n8n webhook endpoint is active",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
