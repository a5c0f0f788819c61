"""
Task Response DTOs

DTOs for task-related API responses and the filter that builds them.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from models import Task
from utils.uuid_helper import parse_uuid
from .record_mapping import build_response


class TaskResponse(BaseModel):
    """Response DTO for task information."""

    id: UUID = Field(description="Task ID")
    user_id: UUID = Field(description="Owning user ID")
    title: str = Field(description="Task title")
    description: Optional[str] = Field(None, description="Task details")
    status: str = Field(description="Task status")
    deadline: Optional[datetime] = Field(None, description="Due date")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


def filter_task_record(task: Task) -> TaskResponse:
    """
    Project a Task row into its API response.

    Raises:
        MalformedIdentityError: If task.id or task.user_id is not a valid UUID
        IncompleteRecordError: If a required column such as title is unset
    """
    return build_response(
        TaskResponse,
        "Task",
        id=parse_uuid(task.id, "Task", "id"),
        user_id=parse_uuid(task.user_id, "Task", "user_id"),
        title=task.title,
        description=task.description,
        status=task.status,
        deadline=task.deadline,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


def filter_task_records(tasks: Iterable[Task]) -> List[TaskResponse]:
    return [filter_task_record(task) for task in tasks]
