"""
Postboard Server - Authentication Endpoints

This module contains the token-producing endpoints: registration and login.
Neither passes through the bearer token dependencies.
"""

import logging
from fastapi import APIRouter, Depends

from models.auth import LoginRequest, LoginResponse, RegisterRequest, TokenClaims, UserResponse
from auth import GetPasswordHasher, GetTokenService, TokenService
from exceptions import CredentialMismatch
from passwords import PasswordHasher


# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()


# ==================== Authentication Endpoints ====================

@router.post("/auth/register", response_model=UserResponse, tags=["Authentication"])
async def register(
    register_request: RegisterRequest,
    password_hasher: PasswordHasher = Depends(GetPasswordHasher)
):
    """
    Create a new user account

    Args:
        register_request: Name, email and password

    Returns:
        UserResponse: The created user, without the password digest

    Raises:
        StorageConflict: If the email is already registered (rendered as 409)
    """
    from database import db_manager

    password_hash = await password_hasher.HashPassword(register_request.password)

    session = db_manager.GetSession()
    try:
        user = db_manager.CreateUser(
            session,
            name=register_request.name,
            email=register_request.email,
            password_hash=password_hash
        )

        logger.info(f"Registered user {user.id} ({user.email})")

        return UserResponse.model_validate(user)

    finally:
        session.close()


@router.post("/auth/login", response_model=LoginResponse, tags=["Authentication"])
async def login(
    login_request: LoginRequest,
    password_hasher: PasswordHasher = Depends(GetPasswordHasher),
    token_service: TokenService = Depends(GetTokenService)
):
    """
    Authenticate user and return a bearer token

    Args:
        login_request: Email and password

    Returns:
        LoginResponse: Claims and the signed token

    Raises:
        CredentialMismatch: Unknown email or wrong password (rendered as 401)
    """
    from database import db_manager

    session = db_manager.GetSession()
    try:
        user = db_manager.GetUserByEmail(session, login_request.email)
    finally:
        session.close()

    if user is None:
        raise CredentialMismatch("No user with this email")

    if not await password_hasher.VerifyPassword(login_request.password, user.password_hash):
        raise CredentialMismatch(f"Wrong password for user {user.id}")

    claims = TokenClaims(id=user.id, email=user.email)
    token = token_service.IssueToken(claims)

    logger.info(f"User {user.id} logged in successfully")

    return LoginResponse(user=claims, token=token)
