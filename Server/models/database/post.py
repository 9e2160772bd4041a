"""
Postboard Server - Post Database Model

Post model for the public blog posts resource.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, DateTime

from models.database.base import Base


class Post(Base):
    """
    Posts table - stores blog posts
    Reads are public; writes require a bearer token
    """
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    body = Column(Text, nullable=False)
    image = Column(String, nullable=True)  # URL
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )
