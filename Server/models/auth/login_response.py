"""
Postboard Server - Login Response Model

Pydantic model for login endpoint response.
"""

from pydantic import BaseModel

from models.auth.token_claims import TokenClaims


class LoginResponse(BaseModel):
    """Response model for login endpoint"""
    user: TokenClaims
    token: str  # Send back as 'Authorization: Bearer <token>'
