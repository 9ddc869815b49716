"""
Dashboard Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from typing import Optional, List, Dict, Any
from datetime import datetime


class NamedCount(BaseModel):
    name: str
    count: int


class TrendPoint(BaseModel):
    date: str
    count: int


class DashboardStats(BaseModel):
    """Aggregate counters for the dashboard."""
    total_articles: int
    articles_change: int
    total_websites: int
    healthy_websites: int
    total_companies: int
    active_companies: int
    success_rate: int
    successful_articles: int
    article_trend: List[TrendPoint]
    articles_by_website: List[NamedCount]
    articles_by_status: List[NamedCount]


class ActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    action: str
    entity_type: Optional[str] = None
    entity_id: Optional[int] = None
    company_id: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = Field(
        default=None, validation_alias=AliasChoices("extra_metadata", "metadata")
    )
    created_at: Optional[datetime] = None
