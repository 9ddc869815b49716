"""
Workflow service.
"""
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from wpauto_backend.db.base import AIPrompt, Webhook, Website, Workflow
from wpauto_backend.schemas.workflow import WorkflowCreate, WorkflowUpdate
from wpauto_backend.services.activity_service import ActivityService


class WorkflowReferenceError(ValueError):
    """Raised when a workflow points at a website, prompt or webhook the user does not own."""


class WorkflowService:
    """Service for workflow management."""

    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityService(db)

    def list_for_user(self, user_id: str) -> List[Workflow]:
        return (
            self.db.query(Workflow)
            .filter(Workflow.user_id == user_id)
            .order_by(Workflow.created_at.desc(), Workflow.id.desc())
            .all()
        )

    def get(self, workflow_id: int, user_id: str) -> Optional[Workflow]:
        return self.db.query(Workflow).filter(
            Workflow.id == workflow_id,
            Workflow.user_id == user_id
        ).first()

    def _check_references(self, user_id: str, website_id=None, prompt_template_id=None, webhook_id=None):
        checks = (
            (Website, website_id, "Website"),
            (AIPrompt, prompt_template_id, "AI prompt"),
            (Webhook, webhook_id, "Webhook"),
        )
        for model, ref_id, label in checks:
            if ref_id is None:
                continue
            exists = self.db.query(model.id).filter(model.id == ref_id, model.user_id == user_id).first()
            if not exists:
                raise WorkflowReferenceError(f"{label} {ref_id} not found")

    async def create_workflow(self, user_id: str, data: WorkflowCreate) -> Workflow:
        self._check_references(user_id, data.website_id, data.prompt_template_id, data.webhook_id)

        workflow = Workflow(user_id=user_id, **data.model_dump())
        try:
            self.db.add(workflow)
            self.db.commit()
            self.db.refresh(workflow)
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(user_id, "workflow_created", "workflow", workflow.id, metadata={"name": workflow.name})
        return workflow

    async def update_workflow(self, workflow_id: int, user_id: str, data: WorkflowUpdate) -> Optional[Workflow]:
        workflow = self.get(workflow_id, user_id)
        if not workflow:
            return None

        updates = data.model_dump(exclude_unset=True)
        self._check_references(
            user_id,
            updates.get("website_id"),
            updates.get("prompt_template_id"),
            updates.get("webhook_id")
        )
        for field, value in updates.items():
            setattr(workflow, field, value)
        workflow.updated_at = datetime.now(timezone.utc)

        try:
            self.db.commit()
            self.db.refresh(workflow)
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(user_id, "workflow_updated", "workflow", workflow.id, metadata={"name": workflow.name})
        return workflow

    async def delete_workflow(self, workflow_id: int, user_id: str) -> bool:
        workflow = self.get(workflow_id, user_id)
        if not workflow:
            return False

        name = workflow.name
        try:
            self.db.delete(workflow)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.activity.log(user_id, "workflow_deleted", "workflow", workflow_id, metadata={"name": name})
        return True
