"""
AI prompt template service.
"""
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from wpauto_backend.db.base import AIPrompt
from wpauto_backend.schemas.ai_prompt import AIPromptCreate, AIPromptUpdate
from wpauto_backend.services.activity_service import ActivityService


class AIPromptService:
    """Service for AI prompt templates."""

    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityService(db)

    def list_for_user(self, user_id: str) -> List[AIPrompt]:
        return (
            self.db.query(AIPrompt)
            .filter(AIPrompt.user_id == user_id)
            .order_by(AIPrompt.created_at.desc(), AIPrompt.id.desc())
            .all()
        )

    def get(self, prompt_id: int, user_id: str) -> Optional[AIPrompt]:
        return self.db.query(AIPrompt).filter(
            AIPrompt.id == prompt_id,
            AIPrompt.user_id == user_id
        ).first()

    async def create_prompt(self, user_id: str, data: AIPromptCreate) -> AIPrompt:
        prompt = AIPrompt(user_id=user_id, name=data.name, template=data.template)
        try:
            self.db.add(prompt)
            self.db.commit()
            self.db.refresh(prompt)
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(user_id, "ai_prompt_created", "ai_prompt", prompt.id, metadata={"name": prompt.name})
        return prompt

    async def update_prompt(self, prompt_id: int, user_id: str, data: AIPromptUpdate) -> Optional[AIPrompt]:
        prompt = self.get(prompt_id, user_id)
        if not prompt:
            return None

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(prompt, field, value)
        prompt.updated_at = datetime.now(timezone.utc)

        try:
            self.db.commit()
            self.db.refresh(prompt)
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(user_id, "ai_prompt_updated", "ai_prompt", prompt.id, metadata={"name": prompt.name})
        return prompt

    async def delete_prompt(self, prompt_id: int, user_id: str) -> bool:
        prompt = self.get(prompt_id, user_id)
        if not prompt:
            return False

        name = prompt.name
        try:
            self.db.delete(prompt)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(user_id, "ai_prompt_deleted", "ai_prompt", prompt_id, metadata={"name": name})
        return True
