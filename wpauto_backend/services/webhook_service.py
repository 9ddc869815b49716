"""
Webhook service: CRUD for outbound integrations and the HTTP trigger.
"""
import json
import logging
from datetime import datetime, timezone
from typing import List, Optional

import requests
from sqlalchemy.orm import Session

from wpauto_backend.core.config import settings
from wpauto_backend.core.security import create_hmac_signature
from wpauto_backend.db.base import Article, Webhook
from wpauto_backend.schemas.webhook import (
    AffectedArticle,
    WebhookCreate,
    WebhookDeleteResponse,
    WebhookUpdate,
)
from wpauto_backend.services.activity_service import ActivityService

logger = logging.getLogger(__name__)

# Dependent articles fetched when checking whether a delete needs confirmation
DEPENDENCY_SAMPLE_SIZE = 10


class WebhookService:
    """Service for webhook handling."""

    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityService(db)

    def list_for_user(self, user_id: str) -> List[Webhook]:
        return (
            self.db.query(Webhook)
            .filter(Webhook.user_id == user_id)
            .order_by(Webhook.created_at.desc(), Webhook.id.desc())
            .all()
        )

    def get(self, webhook_id: int, user_id: Optional[str] = None) -> Optional[Webhook]:
        query = self.db.query(Webhook).filter(Webhook.id == webhook_id)
        if user_id is not None:
            query = query.filter(Webhook.user_id == user_id)
        return query.first()

    async def create_webhook(self, user_id: str, data: WebhookCreate) -> Webhook:
        """Create a webhook for the user."""
        webhook = Webhook(
            user_id=user_id,
            name=data.name,
            url=data.url,
            active=data.active
        )
        try:
            self.db.add(webhook)
            self.db.commit()
            self.db.refresh(webhook)
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Webhook created: {webhook.name} (ID: {webhook.id})")
        self.activity.log(user_id, "webhook_created", "webhook", webhook.id, metadata={"name": webhook.name})
        return webhook

    async def update_webhook(self, webhook_id: int, user_id: str, data: WebhookUpdate) -> Optional[Webhook]:
        """Apply a partial update. Returns None if the webhook is not the user's."""
        webhook = self.get(webhook_id, user_id)
        if not webhook:
            return None

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(webhook, field, value)
        webhook.updated_at = datetime.now(timezone.utc)

        try:
            self.db.commit()
            self.db.refresh(webhook)
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(user_id, "webhook_updated", "webhook", webhook.id, metadata={"name": webhook.name})
        return webhook

    async def delete_webhook(self, webhook_id: int, user_id: str, force: bool = False) -> Optional[WebhookDeleteResponse]:
        """
        Delete a webhook.

        Without ``force``, a webhook still referenced by articles is left in
        place and the response lists the affected articles so the caller can
        confirm. With ``force``, those articles lose their webhook reference.
        """
        webhook = self.get(webhook_id, user_id)
        if not webhook:
            return None

        dependents = (
            self.db.query(Article.id, Article.title)
            .filter(Article.webhook_id == webhook_id)
            .limit(DEPENDENCY_SAMPLE_SIZE)
            .all()
        )

        if dependents and not force:
            message = (
                f"Webhook is used by {len(dependents)} article(s). "
                "They will lose their webhook integration if it is deleted."
            )
            logger.info(f"Webhook {webhook_id} delete needs confirmation: {len(dependents)} dependents")
            return WebhookDeleteResponse(
                requires_confirmation=True,
                message=message,
                dependent_count=len(dependents),
                webhook_id=webhook.id,
                webhook_name=webhook.name,
                affected_articles=[AffectedArticle(id=a.id, title=a.title) for a in dependents]
            )

        name = webhook.name
        try:
            self.db.query(Article).filter(Article.webhook_id == webhook_id).update(
                {Article.webhook_id: None}, synchronize_session=False
            )
            self.db.delete(webhook)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(
            user_id, "webhook_deleted", "webhook", webhook_id,
            metadata={"name": name, "force_delete": force}
        )
        return WebhookDeleteResponse(success=True, id=webhook_id)

    @staticmethod
    def trigger(url: str, payload: dict) -> requests.Response:
        """
        POST a JSON payload to a webhook URL.

        Transport errors propagate to the caller; HTTP error statuses are
        returned as-is.
        """
        body = json.dumps(payload)
        headers = {
            "Content-Type": "application/json",
            "User-Agent": settings.WEBHOOK_USER_AGENT
        }
        if settings.N8N_WEBHOOK_SECRET:
            headers["X-Signature"] = create_hmac_signature(body, settings.N8N_WEBHOOK_SECRET)

        return requests.post(
            url,
            data=body,
            headers=headers,
            timeout=settings.WEBHOOK_TIMEOUT_S
        )
