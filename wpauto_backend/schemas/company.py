"""
Company-related Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional, Dict, Any, Literal
from datetime import datetime

CompanyStatus = Literal["active", "inactive", "suspended"]


class CompanyCreate(BaseModel):
    """Request schema for company creation."""
    name: str
    slug: Optional[str] = None  # derived from name when omitted
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    status: CompanyStatus = "active"
    settings: Dict[str, Any] = {}


class CompanyUpdate(BaseModel):
    """Partial update for a company."""
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    status: Optional[CompanyStatus] = None
    settings: Optional[Dict[str, Any]] = None


class CompanyStatusUpdate(BaseModel):
    status: CompanyStatus


class CompanyResponse(BaseModel):
    """Company as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    owner_id: str
    status: str
    settings: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CompanyWithStats(CompanyResponse):
    """Company with related row counts."""
    website_count: int = 0
    article_count: int = 0
