"""
AI prompt Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class AIPromptCreate(BaseModel):
    name: str
    template: str  # may reference {topic}, {style}, {tone}, {language}, {target_audience}


class AIPromptUpdate(BaseModel):
    name: Optional[str] = None
    template: Optional[str] = None


class AIPromptResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    name: str
    template: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
