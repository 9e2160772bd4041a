"""
Postboard Server - Authentication Utilities

This module provides the bearer token pipeline for protected routes:
- JWT token issuing and verification (TokenService)
- Bearer token extraction from the Authorization header
- FastAPI dependencies that chain extraction -> verification
- The single 401 response used for every authentication failure

Tokens carry only the user id and email. They have no expiry unless
token_expiration_hours is configured, and the verifier does not re-check
that the user still exists.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt

from config import ServerConfig
from exceptions import ExtractionFailure, VerificationFailure
from models.auth import TokenClaims
from passwords import PasswordHasher

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


# ==================== JWT Token Functions ====================

class TokenService:
    """
    Issues and verifies signed JWTs with a single shared secret
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expiration_hours: Optional[int] = None):
        """
        Args:
            secret: Shared signing secret
            algorithm: Symmetric JWT algorithm (HS256/HS384/HS512)
            expiration_hours: Token lifetime, or None for tokens that never expire
        """
        self.secret = secret
        self.algorithm = algorithm
        self.expiration_hours = expiration_hours

    @classmethod
    def FromConfig(cls, config: ServerConfig) -> "TokenService":
        return cls(
            secret=config.jwt_secret,
            algorithm=config.jwt_algorithm,
            expiration_hours=config.token_expiration_hours
        )

    def IssueToken(self, claims: TokenClaims) -> str:
        """
        Create a signed JWT for the given claims

        Args:
            claims: User id and email

        Returns:
            str: Encoded JWT token
        """
        to_encode = claims.model_dump()

        if self.expiration_hours:
            expire = datetime.now(timezone.utc) + timedelta(hours=self.expiration_hours)
            to_encode.update({"exp": expire})

        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def VerifyToken(self, token: str) -> TokenClaims:
        """
        Decode and validate a JWT

        Args:
            token: JWT token string

        Returns:
            TokenClaims: Claims carried by the token

        Raises:
            VerificationFailure: For any invalid token, whatever the cause
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return TokenClaims.model_validate(payload)

        except Exception as e:
            # Malformed, bad signature, expired and bad payload all look the same to the caller
            raise VerificationFailure(f"Token rejected: {type(e).__name__}") from e


# ==================== Bearer Token Extraction ====================

# Reads 'Authorization: Bearer <token>'; returns None instead of raising so
# every failure goes through ExtractionFailure and the uniform 401
bearer_scheme = HTTPBearer(auto_error=False)


def CheckBearerCredentials(credentials: Optional[HTTPAuthorizationCredentials]) -> str:
    """
    Validate the credentials parsed by HTTPBearer and return the token

    Args:
        credentials: HTTPBearer result, or None if the header was missing,
                     had another scheme, or had no token

    Returns:
        str: The token part

    Raises:
        ExtractionFailure: If there is no usable token
    """
    if credentials is None or not credentials.credentials:
        raise ExtractionFailure("Authorization header missing or not 'Bearer <token>'")

    if " " in credentials.credentials:
        raise ExtractionFailure("Authorization header is not '<scheme> <token>'")

    return credentials.credentials


# ==================== Authentication Dependencies ====================

def GetTokenService(request: Request) -> TokenService:
    """FastAPI dependency returning the app's TokenService"""
    return request.app.state.token_service


def GetPasswordHasher(request: Request) -> PasswordHasher:
    """FastAPI dependency returning the app's PasswordHasher"""
    return request.app.state.password_hasher


def ExtractBearerToken(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> str:
    """
    FastAPI dependency that extracts the bearer token
    Stores it on request.state.token for the verification step

    Raises:
        ExtractionFailure: If the header is missing or malformed
    """
    token = CheckBearerCredentials(credentials)
    request.state.token = token
    return token


def VerifyBearerToken(
    request: Request,
    token: str = Depends(ExtractBearerToken),
    token_service: TokenService = Depends(GetTokenService)
) -> TokenClaims:
    """
    FastAPI dependency for protected routes
    Verifies the extracted token and stores the claims on request.state.claims

    Usage:
        @router.post("/something")
        async def some_endpoint(claims: TokenClaims = Depends(VerifyBearerToken)):
            ...

    Raises:
        VerificationFailure: If the token does not verify
    """
    claims = token_service.VerifyToken(token)
    request.state.claims = claims
    return claims


# ==================== Rejection Response ====================

def UnauthorizedResponse() -> JSONResponse:
    """
    The one response for every authentication failure
    Never reveals which check failed
    """
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"status": "Error", "msg": "Unauthorized"},
        headers={"WWW-Authenticate": BEARER_SCHEME},
    )
