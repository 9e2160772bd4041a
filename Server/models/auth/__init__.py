"""
Postboard Server - Auth Models Package

This package contains Pydantic models for authentication endpoints.
"""

from models.auth.login_request import LoginRequest
from models.auth.login_response import LoginResponse
from models.auth.register_request import RegisterRequest
from models.auth.token_claims import TokenClaims
from models.auth.user_response import UserResponse

__all__ = [
    'LoginRequest',
    'LoginResponse',
    'RegisterRequest',
    'TokenClaims',
    'UserResponse',
]
