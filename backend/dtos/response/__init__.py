"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and control exactly what data the API returns.
"""

from .error_response import Violation
from .user_response import UserResponse, filter_user_record, filter_user_records
from .task_response import TaskResponse, filter_task_record, filter_task_records

__all__ = [
    "Violation",
    "UserResponse",
    "TaskResponse",
    "filter_user_record",
    "filter_user_records",
    "filter_task_record",
    "filter_task_records",
]
