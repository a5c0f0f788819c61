"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.
"""

from .auth_request import SignUpInput, SignInInput, ForgotPasswordInput, ResetPasswordInput
from .task_request import TaskInput

__all__ = [
    "SignUpInput",
    "SignInInput",
    "ForgotPasswordInput",
    "ResetPasswordInput",
    "TaskInput",
]
