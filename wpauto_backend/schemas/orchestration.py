"""
Schemas for workflow triggering and n8n progress callbacks.
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any


class ForceProcessRequest(BaseModel):
    """Request schema for force processing an article."""
    article_id: Optional[int] = Field(default=None, alias="articleId")

    model_config = {"populate_by_name": True}


class N8NCallback(BaseModel):
    """Progress update posted by an n8n workflow.

    ``article_id`` and ``status`` are checked by the handler so that a
    missing field yields a 400 rather than a validation error.
    """
    article_id: Optional[int] = None
    status: Optional[str] = None  # started, progress, completed, failed
    progress: Optional[float] = None  # n8n may send fractional percentages
    message: Optional[str] = None
    error: Optional[str] = None
    result: Optional[Dict[str, Any]] = None


class ProcessDueResponse(BaseModel):
    """Summary of a scheduled-article processing run."""
    success: bool
    processed: int = 0
    failed: int = 0
    total: int = 0
    error: Optional[str] = None
