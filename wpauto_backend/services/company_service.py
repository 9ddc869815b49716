"""
Company management service.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from wpauto_backend.db.base import Article, Company, Website
from wpauto_backend.schemas.company import CompanyCreate, CompanyUpdate, CompanyWithStats
from wpauto_backend.services.activity_service import ActivityService
from wpauto_backend.services.article_service import slugify

logger = logging.getLogger(__name__)


class CompanyService:
    """Service for company management."""

    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityService(db)

    def get(self, company_id: int) -> Optional[Company]:
        return self.db.query(Company).filter(Company.id == company_id).first()

    def list_with_stats(self) -> List[CompanyWithStats]:
        """All companies, newest first, with website and article counts."""
        companies = (
            self.db.query(Company)
            .order_by(Company.created_at.desc(), Company.id.desc())
            .all()
        )

        website_counts = dict(
            self.db.query(Website.company_id, func.count(Website.id))
            .filter(Website.company_id.isnot(None))
            .group_by(Website.company_id)
            .all()
        )
        article_counts = dict(
            self.db.query(Website.company_id, func.count(Article.id))
            .join(Article, Article.website_id == Website.id)
            .filter(Website.company_id.isnot(None))
            .group_by(Website.company_id)
            .all()
        )

        result = []
        for company in companies:
            item = CompanyWithStats.model_validate(company)
            item.website_count = website_counts.get(company.id, 0)
            item.article_count = article_counts.get(company.id, 0)
            result.append(item)
        return result

    def _unique_slug(self, base: str, exclude_id: Optional[int] = None) -> str:
        slug = base or "company"
        candidate = slug
        suffix = 2
        while True:
            query = self.db.query(Company.id).filter(Company.slug == candidate)
            if exclude_id is not None:
                query = query.filter(Company.id != exclude_id)
            if not query.first():
                return candidate
            candidate = f"{slug}-{suffix}"
            suffix += 1

    async def create_company(self, owner_id: str, data: CompanyCreate) -> Company:
        """Create a company owned by the caller."""
        company = Company(
            name=data.name,
            slug=self._unique_slug(slugify(data.slug or data.name)),
            description=data.description,
            website_url=data.website_url,
            logo_url=data.logo_url,
            owner_id=owner_id,
            status=data.status,
            settings=data.settings
        )
        try:
            self.db.add(company)
            self.db.commit()
            self.db.refresh(company)
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(
            owner_id, "company_created", "company", company.id,
            company_id=company.id, metadata={"name": company.name}
        )
        return company

    async def update_company(self, company_id: int, user_id: str, data: CompanyUpdate) -> Optional[Company]:
        company = self.get(company_id)
        if not company:
            return None

        updates = data.model_dump(exclude_unset=True)
        if "slug" in updates and updates["slug"]:
            updates["slug"] = self._unique_slug(slugify(updates["slug"]), exclude_id=company_id)
        elif "slug" in updates:
            updates.pop("slug")

        for field, value in updates.items():
            setattr(company, field, value)
        company.updated_at = datetime.now(timezone.utc)

        try:
            self.db.commit()
            self.db.refresh(company)
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(
            user_id, "company_updated", "company", company.id,
            company_id=company.id, metadata={"fields": sorted(updates)}
        )
        return company

    async def update_status(self, company_id: int, user_id: str, status: str) -> Optional[Company]:
        return await self.update_company(company_id, user_id, CompanyUpdate(status=status))

    async def delete_company(self, company_id: int, user_id: str) -> bool:
        company = self.get(company_id)
        if not company:
            return False

        name = company.name
        try:
            self.db.delete(company)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Company deleted: {name} (ID: {company_id})")
        self.activity.log(user_id, "company_deleted", "company", company_id, metadata={"name": name})
        return True
