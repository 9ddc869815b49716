"""
Workflow Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional, Dict, Any, Literal
from datetime import datetime

ScheduleType = Literal["manual", "cron", "interval"]


class WorkflowCreate(BaseModel):
    """Request schema for workflow creation."""
    name: str
    description: Optional[str] = None
    website_id: int
    prompt_template_id: Optional[int] = None
    webhook_id: Optional[int] = None
    is_active: bool = True
    schedule_type: Optional[ScheduleType] = None
    schedule_config: Optional[Dict[str, Any]] = None
    settings: Dict[str, Any] = {}


class WorkflowUpdate(BaseModel):
    """Partial update for a workflow."""
    name: Optional[str] = None
    description: Optional[str] = None
    website_id: Optional[int] = None
    prompt_template_id: Optional[int] = None
    webhook_id: Optional[int] = None
    is_active: Optional[bool] = None
    schedule_type: Optional[ScheduleType] = None
    schedule_config: Optional[Dict[str, Any]] = None
    settings: Optional[Dict[str, Any]] = None


class WorkflowResponse(BaseModel):
    """Workflow as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    name: str
    description: Optional[str] = None
    website_id: int
    prompt_template_id: Optional[int] = None
    webhook_id: Optional[int] = None
    is_active: bool
    schedule_type: Optional[str] = None
    schedule_config: Optional[Dict[str, Any]] = None
    settings: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
