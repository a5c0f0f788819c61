"""
Auth Request DTOs

DTOs for sign-up, sign-in and password recovery request bodies.
"""

from pydantic import BaseModel, Field
from typing import Optional

from config.app_config import PASSWORD_MIN_LENGTH


class SignUpInput(BaseModel):
    """
    Request DTO for creating a local account.

    The password is hashed by the caller before a User is built from it.
    """

    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Login email")
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, description="Plain-text password")
    password_confirm: str = Field(
        ...,
        alias="passwordConfirm",
        min_length=PASSWORD_MIN_LENGTH,
        description="Password repeated for confirmation"
    )
    photo: Optional[str] = Field(None, description="Avatar path")
    role: str = Field(..., min_length=1, description="User role")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "name": "Ada",
                "email": "ada@example.com",
                "password": "correct-horse",
                "passwordConfirm": "correct-horse",
                "role": "user"
            }
        }


class SignInInput(BaseModel):
    """Request DTO for signing in with email and password."""

    email: str = Field(..., min_length=1, description="Login email")
    password: str = Field(..., min_length=1, description="Plain-text password")


class ForgotPasswordInput(BaseModel):
    """Request DTO for asking for a password reset token."""

    email: str = Field(..., min_length=1, description="Account email")


class ResetPasswordInput(BaseModel):
    """Request DTO for setting a new password with a reset token."""

    password: str = Field(..., min_length=1, description="New password")
    password_confirm: str = Field(
        ...,
        alias="passwordConfirm",
        min_length=1,
        description="New password repeated for confirmation"
    )

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
