"""
Website management service.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

import requests
from sqlalchemy.orm import Session

from wpauto_backend.core.config import settings
from wpauto_backend.db.base import Website
from wpauto_backend.schemas.website import ConnectionTestResponse, WebsiteCreate, WebsiteUpdate
from wpauto_backend.services.activity_service import ActivityService

logger = logging.getLogger(__name__)


class WordPressConnectionError(Exception):
    """Raised when a website's REST API cannot be reached."""


class WebsiteService:
    """Service for website management."""

    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityService(db)

    def list_for_user(self, user_id: str) -> List[Website]:
        return (
            self.db.query(Website)
            .filter(Website.user_id == user_id)
            .order_by(Website.created_at.desc(), Website.id.desc())
            .all()
        )

    def get(self, website_id: int, user_id: str) -> Optional[Website]:
        return self.db.query(Website).filter(
            Website.id == website_id,
            Website.user_id == user_id
        ).first()

    async def create_website(self, user_id: str, data: WebsiteCreate) -> Website:
        """Create a website for the user."""
        website = Website(
            user_id=user_id,
            company_id=data.company_id,
            name=data.name,
            url=data.url.rstrip("/"),
            description=data.description,
            status=data.status,
            wp_username=data.wp_username,
            wp_password=data.wp_password,
            settings=data.settings,
            health_status="unknown"
        )
        try:
            self.db.add(website)
            self.db.commit()
            self.db.refresh(website)
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(
            user_id, "website_created", "website", website.id,
            company_id=website.company_id,
            metadata={"name": website.name, "url": website.url}
        )
        return website

    async def update_website(self, website_id: int, user_id: str, data: WebsiteUpdate) -> Optional[Website]:
        website = self.get(website_id, user_id)
        if not website:
            return None

        updates = data.model_dump(exclude_unset=True)
        if updates.get("url"):
            updates["url"] = updates["url"].rstrip("/")
        for field, value in updates.items():
            setattr(website, field, value)
        website.updated_at = datetime.now(timezone.utc)

        try:
            self.db.commit()
            self.db.refresh(website)
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(user_id, "website_updated", "website", website.id, metadata={"name": website.name})
        return website

    async def delete_website(self, website_id: int, user_id: str) -> bool:
        website = self.get(website_id, user_id)
        if not website:
            return False

        name, company_id = website.name, website.company_id
        try:
            self.db.delete(website)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(
            user_id, "website_deleted", "website", website_id,
            company_id=company_id, metadata={"name": name}
        )
        return True

    async def test_connection(self, website: Website) -> ConnectionTestResponse:
        """
        Probe ``<url>/wp-json/`` and record the result on the website.

        Raises:
            WordPressConnectionError: if the site could not be reached
        """
        endpoint = f"{website.url.rstrip('/')}/wp-json/"
        logger.info(f"Testing WordPress connection: {endpoint}")

        try:
            response = requests.get(endpoint, timeout=settings.WORDPRESS_TIMEOUT_S)
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"WordPress connection failed for website {website.id}: {e}")
            website.last_health_check = datetime.now(timezone.utc)
            website.health_status = "error"
            self.db.commit()
            raise WordPressConnectionError("Failed to connect to WordPress site") from e

        if not isinstance(data, dict):
            data = {}

        website.wordpress_version = data.get("version") or None
        website.last_health_check = datetime.now(timezone.utc)
        website.health_status = "healthy" if response.ok else "error"
        self.db.commit()

        logger.info(f"Website {website.id} health: {website.health_status}")
        return ConnectionTestResponse(
            success=True,
            health_status=website.health_status,
            wordpress_version=website.wordpress_version,
            data=data
        )
