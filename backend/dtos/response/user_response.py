"""
User Response DTOs

DTOs for user-related API responses and the filter that builds them.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from models import User
from utils.uuid_helper import parse_uuid
from .record_mapping import build_response


class UserResponse(BaseModel):
    """
    Response DTO for user information.

    Only the public profile is exposed. The password hash, verification
    code and reset token have no field here.
    """

    id: UUID = Field(description="User ID")
    name: str = Field(description="Display name")
    email: str = Field(description="Login email")
    role: str = Field(description="User role")
    photo: str = Field(description="Avatar path")
    provider: str = Field(description="Auth provider")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


def filter_user_record(user: User) -> UserResponse:
    """
    Project a User row into its API response.

    Args:
        user: Persisted or freshly constructed user

    Returns:
        UserResponse without any credential fields

    Raises:
        MalformedIdentityError: If user.id is not a valid UUID
        IncompleteRecordError: If a required column such as name is unset
    """
    return build_response(
        UserResponse,
        "User",
        id=parse_uuid(user.id, "User", "id"),
        name=user.name,
        email=user.email,
        role=user.role,
        photo=user.resolved_photo,
        provider=user.resolved_provider,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def filter_user_records(users: Iterable[User]) -> List[UserResponse]:
    return [filter_user_record(user) for user in users]
