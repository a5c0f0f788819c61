"""
Task repository for task-specific data access operations.
"""

from typing import Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from models import Task
from .base_repository import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Repository for Task model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Task)

    def get_for_user(self, user_id: str, status: Optional[str] = None) -> List[Task]:
        """
        Get a user's tasks, newest first.

        Args:
            user_id: Owning user UUID
            status: Only return tasks in this status

        Returns:
            List of tasks
        """
        query = self.db.query(self.model).filter(self.model.user_id == user_id)
        if status is not None:
            query = query.filter(self.model.status == status)
        return query.order_by(self.model.created_at.desc()).all()

    def get_owned(self, task_id: str, user_id: str) -> Optional[Task]:
        """Get a task only if it belongs to the given user."""
        return self.db.query(self.model).filter(
            self.model.id == task_id,
            self.model.user_id == user_id
        ).first()

    def count_by_status(self, user_id: str) -> Dict[str, int]:
        """
        Count a user's tasks grouped by status.

        Returns:
            Mapping of status to number of tasks
        """
        rows = self.db.query(
            self.model.status,
            func.count(self.model.id)
        ).filter(
            self.model.user_id == user_id
        ).group_by(self.model.status).all()
        return {status: count for status, count in rows}
