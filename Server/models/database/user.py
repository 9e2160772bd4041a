"""
Postboard Server - User Database Model

User model for authentication.
Stores the display name, login email and bcrypt password digest.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime

from models.database.base import Base


class User(Base):
    """
    Users table - stores user credentials
    Email uniqueness is enforced by the database, not by application code
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )
