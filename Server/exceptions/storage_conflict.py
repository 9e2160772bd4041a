"""
Postboard Server - Storage Conflict Error

Exception raised when an insert violates a uniqueness constraint.
"""

from exceptions.postboard_error import PostboardError


class StorageConflict(PostboardError):
    """Exception for unique constraint violations (e.g. duplicate email)."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field
