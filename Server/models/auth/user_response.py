"""
Postboard Server - User Response Model

Pydantic model for the user record returned by registration.
The password digest is deliberately absent.
"""

from datetime import datetime, timezone
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class UserResponse(BaseModel):
    """Response model for a created user"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt"
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt"
    )

    @field_validator("created_at", "updated_at")
    @classmethod
    def AssumeUtc(cls, value: datetime) -> datetime:
        """SQLite hands back naive datetimes; they are stored as UTC"""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
