"""
Postboard Server - Base Error

Base exception class for all Postboard server errors.
"""


class PostboardError(Exception):
    """Base exception for Postboard server errors."""
    pass
