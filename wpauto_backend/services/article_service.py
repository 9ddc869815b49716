"""
Article management service.
"""
import logging
import math
import re
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from wpauto_backend.db.base import Article, Webhook, Website
from wpauto_backend.schemas.article import (
    ArticleCreate,
    ArticleGenerateRequest,
    ArticleListResponse,
    ArticleResponse,
    ArticleUpdate,
)
from wpauto_backend.services.activity_service import ActivityService

logger = logging.getLogger(__name__)


def slugify(text: str) -> str:
    """Lowercase, collapse non-alphanumerics to '-', trim leading/trailing '-'."""
    slug = re.sub(r"[^a-z0-9]+", "-", (text or "").lower())
    return slug.strip("-")


def count_words(content: Optional[str]) -> int:
    if not content:
        return 0
    return len(content.split())


class ArticleReferenceError(ValueError):
    """Raised when an article points at a website or webhook the user does not own."""


class ArticleService:
    """Service for article management."""

    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityService(db)

    def get(self, article_id: int, user_id: str) -> Optional[Article]:
        return (
            self.db.query(Article)
            .options(joinedload(Article.website))
            .filter(Article.id == article_id, Article.user_id == user_id)
            .first()
        )

    def list_articles(
        self,
        user_id: str,
        page: int = 1,
        limit: int = 10,
        status: Optional[str] = None,
        generation_type: Optional[str] = None,
        search: Optional[str] = None
    ) -> ArticleListResponse:
        """Paginated listing of the user's articles, newest first."""
        page = max(page, 1)
        limit = max(limit, 1)

        query = self.db.query(Article).filter(Article.user_id == user_id)

        if status and status != "all":
            query = query.filter(Article.status == status)
        if generation_type and generation_type != "all":
            query = query.filter(Article.generation_type == generation_type)
        if search and search.strip():
            term = f"%{search.strip()}%"
            query = query.filter(or_(Article.title.ilike(term), Article.content.ilike(term)))

        total = query.count()
        articles = (
            query.options(joinedload(Article.website))
            .order_by(Article.created_at.desc(), Article.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )

        return ArticleListResponse(
            articles=[ArticleResponse.model_validate(a) for a in articles],
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit)
        )

    def _check_references(self, user_id: str, website_id: Optional[int] = None, webhook_id: Optional[int] = None):
        if website_id is not None:
            website = self.db.query(Website.id).filter(
                Website.id == website_id, Website.user_id == user_id
            ).first()
            if not website:
                raise ArticleReferenceError(f"Website {website_id} not found")
        if webhook_id is not None:
            webhook = self.db.query(Webhook.id).filter(
                Webhook.id == webhook_id, Webhook.user_id == user_id
            ).first()
            if not webhook:
                raise ArticleReferenceError(f"Webhook {webhook_id} not found")

    async def create_article(self, user_id: str, data: ArticleCreate) -> Article:
        """Create an article from manual input."""
        self._check_references(user_id, data.website_id, data.webhook_id)

        article = Article(
            user_id=user_id,
            website_id=data.website_id,
            webhook_id=data.webhook_id,
            workflow_id=data.workflow_id,
            title=data.title,
            slug=slugify(data.title),
            content=data.content,
            excerpt=data.excerpt or None,
            status=data.status,
            category=data.category or None,
            tags=data.tags or [],
            word_count=count_words(data.content),
            generation_type="manual"
        )
        if data.status in ("published", "posted"):
            article.published_at = datetime.now(timezone.utc)

        try:
            self.db.add(article)
            self.db.commit()
            self.db.refresh(article)
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Article created: {article.title} (ID: {article.id})")
        self.activity.log(user_id, "article_created", "article", article.id, metadata={"title": article.title})
        return article

    async def update_article(self, article_id: int, user_id: str, data: ArticleUpdate) -> Optional[Article]:
        """Apply a partial update, keeping slug and word count in step."""
        article = self.get(article_id, user_id)
        if not article:
            return None

        updates = data.model_dump(exclude_unset=True)
        if "status" in updates and updates["status"] is None:
            updates.pop("status")
        if "webhook_id" in updates:
            self._check_references(user_id, webhook_id=updates["webhook_id"])

        if updates.get("title"):
            updates["slug"] = slugify(updates["title"])
        elif "title" in updates:
            updates.pop("title")
        if "content" in updates:
            updates["word_count"] = count_words(updates["content"])
        if "excerpt" in updates:
            updates["excerpt"] = updates["excerpt"] or None
        if "category" in updates:
            updates["category"] = updates["category"] or None
        if "tags" in updates:
            updates["tags"] = updates["tags"] or []

        for field, value in updates.items():
            setattr(article, field, value)
        article.updated_at = datetime.now(timezone.utc)

        try:
            self.db.commit()
            self.db.refresh(article)
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(user_id, "article_updated", "article", article.id, metadata={"title": article.title})
        return article

    async def delete_article(self, article_id: int, user_id: str) -> bool:
        article = self.get(article_id, user_id)
        if not article:
            return False

        title = article.title
        try:
            self.db.delete(article)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(user_id, "article_deleted", "article", article_id, metadata={"title": title})
        return True

    async def queue_generation(self, user_id: str, data: ArticleGenerateRequest) -> Article:
        """
        Create an article whose content will be produced by an n8n workflow.

        Scheduled generations start as ``pending`` and are picked up once
        ``scheduled_at`` passes; manual ones start as ``draft`` until
        force-processed.
        """
        self._check_references(user_id, data.website_id, data.webhook_id)

        scheduled_at = data.scheduled_datetime
        if scheduled_at is not None and scheduled_at.tzinfo is None:
            scheduled_at = scheduled_at.replace(tzinfo=timezone.utc)

        article = Article(
            user_id=user_id,
            website_id=data.website_id,
            webhook_id=data.webhook_id,
            workflow_id=data.workflow_id,
            title=data.topic,
            slug=slugify(data.topic),
            status="pending" if data.generation_type == "scheduled" else "draft",
            scheduled_at=scheduled_at,
            generation_type=data.generation_type
        )
        try:
            self.db.add(article)
            self.db.commit()
            self.db.refresh(article)
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Article queued for {data.generation_type} generation: {article.title} (ID: {article.id})")
        self.activity.log(
            user_id, "article_generated", "article", article.id,
            metadata={"title": article.title, "generation_type": data.generation_type}
        )
        return article

    def upcoming_scheduled(self, user_id: str, days: int = 7) -> List[Article]:
        """Scheduled articles still waiting to run within the next ``days``."""
        now = datetime.now(timezone.utc)
        cutoff = now + timedelta(days=days)
        return (
            self.db.query(Article)
            .options(joinedload(Article.website))
            .filter(
                Article.user_id == user_id,
                Article.generation_type == "scheduled",
                Article.status.in_(["pending", "scheduled"]),
                Article.scheduled_at >= now,
                Article.scheduled_at <= cutoff
            )
            .order_by(Article.scheduled_at)
            .all()
        )
