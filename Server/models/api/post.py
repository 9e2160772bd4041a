"""
Postboard Server - Post API Models

Pydantic models for the posts endpoints.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class PostCreateRequest(BaseModel):
    """Request model for creating a post"""
    title: str
    body: str
    image: Optional[str] = None


class PostUpdateRequest(BaseModel):
    """Request model for updating a post - only provided fields change"""
    title: Optional[str] = None
    body: Optional[str] = None
    image: Optional[str] = None


class PostResponse(BaseModel):
    """Response model for a post"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: str
    image: Optional[str]
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
