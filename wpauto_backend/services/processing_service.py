"""
Article processing: hand an article to its n8n webhook and record the outcome.

Each trigger is one HTTP round trip followed by one status update. Nothing is
retried; a failed article stays failed until someone processes it again.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import requests
from sqlalchemy.orm import Session, joinedload

from wpauto_backend.db.base import Article, ExecutionLog, Webhook
from wpauto_backend.services.system_log_service import SystemLogService
from wpauto_backend.services.webhook_service import WebhookService

logger = logging.getLogger(__name__)

PROCESSABLE_STATUSES = ("pending", "scheduled")
PROCESSABLE_GENERATION_TYPES = ("scheduled", "manual")


class ProcessingError(Exception):
    """Processing failure carrying the HTTP status the API should answer with."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ArticleProcessingService:
    """Service for triggering article generation workflows."""

    def __init__(self, db: Session):
        self.db = db
        self.system_log = SystemLogService(db)

    def find_candidate(self, article_id: Optional[int] = None) -> Optional[Article]:
        """The requested article, or the newest one waiting on a webhook."""
        query = self.db.query(Article).options(joinedload(Article.website))

        if article_id is not None:
            return query.filter(Article.id == article_id).first()

        return (
            query.filter(
                Article.status.in_(PROCESSABLE_STATUSES),
                Article.generation_type.in_(PROCESSABLE_GENERATION_TYPES),
                Article.webhook_id.isnot(None)
            )
            .order_by(Article.created_at.desc(), Article.id.desc())
            .first()
        )

    @staticmethod
    def build_payload(article: Article, webhook: Webhook, trigger_type: str, forced: bool) -> Dict[str, Any]:
        """Payload in the shape the n8n workflows expect."""
        website = article.website
        now = _utcnow().isoformat()
        scheduled_at = article.scheduled_at.isoformat() if article.scheduled_at else now

        return {
            "body": {
                "topic": article.title,
                "website_id": article.website_id,
                "article_id": article.id,
                "trigger_type": trigger_type,
                "user_id": article.user_id,
                "scheduled_at": scheduled_at,
                "metadata": {
                    "website_name": website.name if website else "",
                    "website_url": website.url if website else "",
                    "website_username": (website.wp_username if website else None) or "",
                    "website_password": (website.wp_password if website else None) or "",
                    "webhook_name": webhook.name,
                    "webhook_id": webhook.id,
                    "generation_type": article.generation_type,
                    "processed_at": now,
                    "forced": forced
                }
            }
        }

    async def force_process(self, article_id: Optional[int] = None) -> Dict[str, Any]:
        """
        Trigger the webhook for one article right now.

        Raises:
            ProcessingError: when no article qualifies, the webhook is missing,
                or the webhook call fails
        """
        article = self.find_candidate(article_id)
        if not article:
            raise ProcessingError("No suitable article found to process", 404)

        logger.info(f"[FORCE] Processing article: {article.title} (ID: {article.id})")
        return await self.dispatch(article, trigger_type="manual_force_process", forced=True)

    async def dispatch(self, article: Article, trigger_type: str, forced: bool) -> Dict[str, Any]:
        """Send one article to its webhook and move its status accordingly."""
        if not article.webhook_id:
            raise ProcessingError("Article has no webhook_id", 400)

        webhook = self.db.query(Webhook).filter(Webhook.id == article.webhook_id).first()
        if not webhook:
            raise ProcessingError(f"Webhook {article.webhook_id} not found", 404)

        logger.info(f"[FORCE] Using webhook: {webhook.name} ({webhook.url})")

        article.status = "processing"
        article.updated_at = _utcnow()
        self.db.commit()

        payload = self.build_payload(article, webhook, trigger_type, forced)

        try:
            response = WebhookService.trigger(webhook.url, payload)
        except requests.RequestException as e:
            error = f"Webhook request failed: {e}"
            logger.error(f"[FORCE] {error}")
            self._mark_failed(article, webhook, trigger_type, error)
            raise ProcessingError(error, 500) from e

        logger.info(f"[FORCE] Webhook response status: {response.status_code}")

        if not 200 <= response.status_code < 300:
            error = f"Webhook failed with status {response.status_code}: {response.text}"
            logger.error(f"[FORCE] {error}")
            self._mark_failed(article, webhook, trigger_type, error, response.status_code)
            raise ProcessingError(error, 500)

        response_text = response.text
        article.status = "posted"
        article.error_message = None
        article.failed_at = None
        article.updated_at = _utcnow()
        self.db.add(ExecutionLog(
            article_id=article.id,
            status="success",
            trigger_type=trigger_type,
            extra_metadata={
                "webhook_id": webhook.id,
                "response_status": response.status_code,
                "forced": forced
            }
        ))
        self.db.commit()

        logger.info(f"[FORCE] Webhook success for article {article.id}")
        self.system_log.record(
            "info",
            f"Article {article.id} handed to webhook {webhook.name}",
            source=trigger_type,
            user_id=article.user_id,
            details={"article_id": article.id, "webhook_id": webhook.id, "status": "posted"}
        )

        return {
            "article": {"id": article.id, "title": article.title, "status": article.status},
            "webhook": {"id": webhook.id, "name": webhook.name, "url": webhook.url},
            "webhook_response": {"status": response.status_code, "body": response_text}
        }

    def _mark_failed(
        self,
        article: Article,
        webhook: Webhook,
        trigger_type: str,
        error: str,
        response_status: Optional[int] = None
    ) -> None:
        now = _utcnow()
        article.status = "failed"
        article.error_message = error
        article.failed_at = now
        article.updated_at = now
        self.db.add(ExecutionLog(
            article_id=article.id,
            status="failed",
            trigger_type=trigger_type,
            extra_metadata={
                "webhook_id": webhook.id,
                "response_status": response_status,
                "error": error
            }
        ))
        self.db.commit()

        self.system_log.record(
            "error",
            f"Article {article.id} failed to reach webhook {webhook.name}",
            source=trigger_type,
            user_id=article.user_id,
            details={"article_id": article.id, "webhook_id": webhook.id, "status": "failed", "error": error}
        )

    async def process_due_articles(self) -> Dict[str, Any]:
        """
        Trigger every scheduled article whose time has come.

        Only articles bound to an active webhook are picked up.
        """
        try:
            now = _utcnow()
            due_articles = (
                self.db.query(Article)
                .options(joinedload(Article.website))
                .join(Webhook, Article.webhook_id == Webhook.id)
                .filter(
                    Article.generation_type == "scheduled",
                    Article.status.in_(PROCESSABLE_STATUSES),
                    Article.scheduled_at.isnot(None),
                    Article.scheduled_at <= now,
                    Webhook.active.is_(True)
                )
                .order_by(Article.scheduled_at)
                .all()
            )

            logger.info(f"[SCHEDULER] Found {len(due_articles)} scheduled articles due for processing")

            processed = 0
            failed = 0
            for article in due_articles:
                try:
                    await self.dispatch(article, trigger_type="scheduled", forced=False)
                    processed += 1
                except ProcessingError as e:
                    logger.warning(f"[SCHEDULER] Article {article.id} failed: {e.message}")
                    failed += 1

            return {
                "success": True,
                "processed": processed,
                "failed": failed,
                "total": len(due_articles)
            }

        except Exception as e:
            logger.exception(f"[SCHEDULER] Error processing due articles: {e}")
            self.db.rollback()
            return {"success": False, "error": str(e)}
