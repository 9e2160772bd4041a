"""
Postboard Server - Record Not Found Error

Exception raised when a requested record does not exist.
"""

from exceptions.postboard_error import PostboardError


class RecordNotFound(PostboardError):
    """Exception for lookups of missing records."""

    def __init__(self, resource: str, record_id=None):
        super().__init__(f"{resource} {record_id} not found")
        self.resource = resource
        self.record_id = record_id
