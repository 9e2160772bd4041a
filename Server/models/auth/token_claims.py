"""
Postboard Server - Token Claims Model

Pydantic model for the claims embedded in a bearer token.
Must never carry the password or its digest.
"""

from pydantic import BaseModel


class TokenClaims(BaseModel):
    """Claims stored in the JWT"""
    id: int
    email: str
