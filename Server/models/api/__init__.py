"""
Postboard Server - API Models Package

This package contains Pydantic models for resource endpoints.
"""

from models.api.message import MessageResponse
from models.api.post import PostCreateRequest, PostUpdateRequest, PostResponse

__all__ = [
    'MessageResponse',
    'PostCreateRequest',
    'PostUpdateRequest',
    'PostResponse',
]
