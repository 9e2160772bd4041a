"""
Postboard Server - Models Package

This package contains all data models for the Postboard server:
- database: SQLAlchemy database models
- auth: Authentication-related Pydantic models
- api: Resource endpoint Pydantic models
"""

# Re-export all models for convenient importing
from models.database import *
from models.auth import *
from models.api import *
