"""
Error Response DTOs

DTOs describing validation failures returned to API clients.
"""

from pydantic import BaseModel, Field
from typing import Optional


class Violation(BaseModel):
    """
    A single field-level validation failure.

    value carries the constraint parameter (e.g. "8" for a min length),
    not the offending input.
    """

    field: str = Field(description="Namespaced field path, e.g. SignUpInput.email")
    tag: str = Field(description="Violated constraint tag")
    value: Optional[str] = Field(None, description="Constraint parameter")

    class Config:
        """Pydantic configuration."""
        frozen = True
