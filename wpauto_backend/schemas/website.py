"""
Website-related Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional, Dict, Any, Literal
from datetime import datetime

WebsiteStatus = Literal["active", "inactive", "maintenance"]


class WebsiteCreate(BaseModel):
    """Request schema for website creation."""
    name: str
    url: str
    description: Optional[str] = None
    company_id: Optional[int] = None
    status: WebsiteStatus = "active"
    wp_username: Optional[str] = None
    wp_password: Optional[str] = None  # WordPress application password
    settings: Dict[str, Any] = {}


class WebsiteUpdate(BaseModel):
    """Partial update for a website."""
    name: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    company_id: Optional[int] = None
    status: Optional[WebsiteStatus] = None
    wp_username: Optional[str] = None
    wp_password: Optional[str] = None
    settings: Optional[Dict[str, Any]] = None


class WebsiteResponse(BaseModel):
    """Website as returned by the API. Credentials are never echoed."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    company_id: Optional[int] = None
    name: str
    url: str
    description: Optional[str] = None
    status: str
    wp_username: Optional[str] = None
    wordpress_version: Optional[str] = None
    last_health_check: Optional[datetime] = None
    health_status: Optional[str] = None
    settings: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ConnectionTestResponse(BaseModel):
    """Result of probing a WordPress REST API."""
    success: bool
    health_status: str
    wordpress_version: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
