"""
Application-wide constants.

This module centralizes the magic strings used by the models, DTOs and
error handlers.
"""
from enum import Enum


class TaskStatus(str, Enum):
    """
    Conventional task statuses.

    Task.status is stored as free-form text; these are the values the
    frontend offers.
    """

    TODO = 'To Do'
    IN_PROGRESS = 'In Progress'
    COMPLETED = 'Completed'

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in {status.value for status in cls}


class UserDefaults:
    """Storage defaults for optional user columns"""

    PROVIDER = 'local'
    PHOTO = 'default.png'
    VERIFIED = False


class ValidationTag:
    """Constraint tags reported in validation violations"""

    REQUIRED = 'required'
    MIN = 'min'
    MAX = 'max'
    TYPE = 'type'
    INVALID = 'invalid'


class HTTPStatus:
    """HTTP status codes used by the error handlers"""

    BAD_REQUEST = 400
    CONFLICT = 409
    INTERNAL_SERVER_ERROR = 500
