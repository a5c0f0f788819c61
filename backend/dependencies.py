"""
Dependency injection providers for FastAPI.

Request handlers receive repositories bound to the per-request session
from get_db.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from database import get_db
from repositories.user_repository import UserRepository
from repositories.task_repository import TaskRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """
    Factory function for creating UserRepository instances.

    Args:
        db: Database session

    Returns:
        UserRepository instance
    """
    return UserRepository(db)


def get_task_repository(db: Session = Depends(get_db)) -> TaskRepository:
    """
    Factory function for creating TaskRepository instances.

    Args:
        db: Database session

    Returns:
        TaskRepository instance
    """
    return TaskRepository(db)
