"""
User activity audit trail.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from wpauto_backend.db.base import UserActivityLog

logger = logging.getLogger(__name__)


class ActivityService:
    """Service for recording and reading user activity."""

    def __init__(self, db: Session):
        self.db = db

    def log(
        self,
        user_id: str,
        action: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[int] = None,
        company_id: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record one activity row. Failures are logged, never raised."""
        try:
            self.db.add(UserActivityLog(
                user_id=user_id,
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
                company_id=company_id,
                extra_metadata=metadata or {}
            ))
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.warning(f"Failed to record activity {action} for user {user_id}: {e}")

    def recent(self, user_id: str, limit: int = 10) -> List[UserActivityLog]:
        return (
            self.db.query(UserActivityLog)
            .filter(UserActivityLog.user_id == user_id)
            .order_by(UserActivityLog.created_at.desc(), UserActivityLog.id.desc())
            .limit(limit)
            .all()
        )
