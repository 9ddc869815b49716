"""
Dashboard statistics.
"""
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from wpauto_backend.db.base import Article, Company, Website
from wpauto_backend.schemas.dashboard import DashboardStats, NamedCount, TrendPoint

TIME_RANGES = {"7d": 7, "30d": 30, "90d": 90}
SUCCESS_STATUSES = ("posted", "published")


def _as_utc_date(value: datetime):
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date()


class DashboardService:
    """Service computing dashboard counters."""

    def __init__(self, db: Session):
        self.db = db

    def get_stats(self, time_range: str = "7d") -> DashboardStats:
        days = TIME_RANGES.get(time_range, 90)
        start = datetime.now(timezone.utc) - timedelta(days=days)

        total_articles = self.db.query(func.count(Article.id)).scalar() or 0
        recent_articles = self.db.query(func.count(Article.id)).filter(Article.created_at >= start).scalar() or 0
        successful = (
            self.db.query(func.count(Article.id))
            .filter(Article.status.in_(SUCCESS_STATUSES))
            .scalar() or 0
        )
        total_websites = self.db.query(func.count(Website.id)).scalar() or 0
        healthy_websites = (
            self.db.query(func.count(Website.id)).filter(Website.health_status == "healthy").scalar() or 0
        )
        total_companies = self.db.query(func.count(Company.id)).scalar() or 0
        active_companies = (
            self.db.query(func.count(Company.id)).filter(Company.status == "active").scalar() or 0
        )

        success_rate = round(successful / total_articles * 100) if total_articles else 0
        articles_change = round(recent_articles / max(1, total_articles - recent_articles) * 100)

        return DashboardStats(
            total_articles=total_articles,
            articles_change=articles_change,
            total_websites=total_websites,
            healthy_websites=healthy_websites,
            total_companies=total_companies,
            active_companies=active_companies,
            success_rate=success_rate,
            successful_articles=successful,
            article_trend=self.article_trend(days),
            articles_by_website=self.articles_by_website(),
            articles_by_status=self.articles_by_status()
        )

    def article_trend(self, days: int) -> List[TrendPoint]:
        """Article counts per day, oldest first, ending today."""
        today = datetime.now(timezone.utc).date()
        dates = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
        start = datetime.now(timezone.utc) - timedelta(days=days)

        created = self.db.query(Article.created_at).filter(Article.created_at >= start).all()
        counts = Counter(_as_utc_date(row.created_at) for row in created if row.created_at)

        return [TrendPoint(date=d.isoformat(), count=counts.get(d, 0)) for d in dates]

    def articles_by_website(self, top: int = 5) -> List[NamedCount]:
        rows = (
            self.db.query(Website.name, func.count(Article.id).label("count"))
            .join(Article, Article.website_id == Website.id)
            .group_by(Website.id, Website.name)
            .order_by(func.count(Article.id).desc())
            .limit(top)
            .all()
        )
        return [NamedCount(name=row.name or "Unknown", count=row.count) for row in rows]

    def articles_by_status(self) -> List[NamedCount]:
        rows = self.db.query(Article.status, func.count(Article.id)).group_by(Article.status).all()
        return [
            NamedCount(name=(status or "unknown").capitalize(), count=count)
            for status, count in rows
        ]
