"""
Inbound progress updates from n8n article-generation workflows.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from wpauto_backend.db.base import Article, ExecutionLog
from wpauto_backend.schemas.orchestration import N8NCallback

logger = logging.getLogger(__name__)

# n8n callback status -> articles.status
STATUS_MAP = {
    "started": "processing",
    "progress": "processing",
    "completed": "posted",
    "failed": "failed",
}

# result key -> article column, applied on completion
RESULT_FIELDS = {
    "post_url": "wp_post_url",
    "post_id": "wp_post_id",
    "word_count": "word_count",
    "generation_time": "generation_time_seconds",
}


def map_status(n8n_status: str) -> str:
    return STATUS_MAP.get(n8n_status, "processing")


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


class N8NCallbackService:
    """Service applying n8n callbacks to articles."""

    def __init__(self, db: Session):
        self.db = db

    async def update_article_progress(self, callback: N8NCallback) -> Optional[Dict[str, Any]]:
        """
        Apply one callback to its article.

        Returns None when the article does not exist.
        """
        article = self.db.query(Article).filter(Article.id == callback.article_id).first()
        if not article:
            logger.warning(f"[N8N] Callback for unknown article {callback.article_id}")
            return None

        now = datetime.now(timezone.utc)
        article_status = map_status(callback.status)

        article.status = article_status
        article.updated_at = now

        if callback.progress is not None:
            article.generation_progress = min(max(round(callback.progress), 0), 100)

        if callback.message:
            article.generation_message = callback.message

        if callback.error and callback.status == "failed":
            article.error_message = callback.error
            article.failed_at = now

        if callback.result and callback.status == "completed":
            article.published_at = now
            for key, column in RESULT_FIELDS.items():
                value = callback.result.get(key)
                if value and column != "wp_post_url":
                    value = _as_int(value)
                if value:
                    setattr(article, column, value)

        self.db.add(ExecutionLog(
            article_id=article.id,
            status="failed" if callback.status == "failed" else "success",
            trigger_type="webhook",
            extra_metadata={
                "webhook_source": "n8n",
                "n8n_status": callback.status,
                "progress": callback.progress,
                "message": callback.message,
                "error": callback.error,
                "result": callback.result,
                "updated_at": now.isoformat()
            }
        ))

        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"[N8N] Updated article {article.id} status to {article_status}")
        return {
            "article_id": article.id,
            "status": article_status,
            "progress": callback.progress,
            "message": callback.message
        }
