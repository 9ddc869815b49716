"""
Persisted system logs written by the orchestration flows.
"""
import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from wpauto_backend.db.base import SystemLog

logger = logging.getLogger(__name__)

LOG_LEVELS = ("info", "warn", "error", "debug")


class SystemLogService:
    """Service for writing system_logs rows."""

    def __init__(self, db: Session):
        self.db = db

    def record(
        self,
        level: str,
        message: str,
        source: str,
        user_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> Optional[SystemLog]:
        """Persist a log entry. Returns None if the write fails."""
        if level not in LOG_LEVELS:
            level = "info"

        try:
            entry = SystemLog(
                level=level,
                message=message,
                source=source,
                user_id=user_id,
                extra_metadata=metadata or {},
                details=details or {}
            )
            self.db.add(entry)
            self.db.commit()
            self.db.refresh(entry)
            return entry
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to write system log from {source}: {e}")
            return None
