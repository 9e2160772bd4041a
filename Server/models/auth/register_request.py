"""
Postboard Server - Register Request Model

Pydantic model for registration endpoint request.
No format validation beyond presence; the database enforces uniqueness.
"""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Request model for register endpoint"""
    name: str
    email: str
    password: str
