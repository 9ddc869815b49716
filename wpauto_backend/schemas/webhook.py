"""
Webhook-related Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime


class WebhookCreate(BaseModel):
    """Request schema for webhook creation."""
    name: str
    url: str
    active: bool = True


class WebhookUpdate(BaseModel):
    """Partial update for a webhook."""
    name: Optional[str] = None
    url: Optional[str] = None
    active: Optional[bool] = None


class WebhookResponse(BaseModel):
    """Webhook as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    name: str
    url: str
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AffectedArticle(BaseModel):
    id: int
    title: str


class WebhookDeleteResponse(BaseModel):
    """Response for webhook deletion, possibly asking for confirmation."""
    success: bool = False
    id: Optional[int] = None
    requires_confirmation: bool = False
    message: Optional[str] = None
    dependent_count: int = 0
    webhook_id: Optional[int] = None
    webhook_name: Optional[str] = None
    affected_articles: List[AffectedArticle] = []
