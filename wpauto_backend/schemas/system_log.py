"""
System log Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from typing import Optional, Dict, Any
from datetime import datetime


class SystemLogCreate(BaseModel):
    """Request schema for a system log entry."""
    level: Optional[str] = None  # info, warn, error, debug
    message: Optional[str] = None
    source: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    details: Optional[Dict[str, Any]] = None


class SystemLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    level: str
    message: str
    source: str
    user_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = Field(
        default=None, validation_alias=AliasChoices("extra_metadata", "metadata")
    )
    details: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
