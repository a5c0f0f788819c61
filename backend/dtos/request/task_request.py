"""
Task Request DTOs

DTOs for task-related API requests.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class TaskInput(BaseModel):
    """
    Request DTO for creating a task.

    status is free-form; see constants.TaskStatus for the usual values.
    """

    title: str = Field(..., min_length=1, description="Task title")
    description: Optional[str] = Field(None, description="Task details")
    status: str = Field(..., min_length=1, description="Task status")
    deadline: Optional[datetime] = Field(None, description="Due date")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "title": "Write report",
                "description": "Quarterly numbers",
                "status": "To Do"
            }
        }
