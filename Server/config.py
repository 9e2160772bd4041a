"""
Postboard Server - Configuration

This module builds the immutable server configuration from environment
variables. The configuration is loaded once at startup and handed to
CreateApp(), which stores it on app.state for the rest of the process.
"""

import logging
import os
import secrets
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# bcrypt accepts cost factors in this range
MIN_WORK_FACTOR = 4
MAX_WORK_FACTOR = 31

SUPPORTED_ALGORITHMS = ("HS256", "HS384", "HS512")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ServerConfig:
    """
    Runtime configuration for the Postboard server

    Provide the signing secret via POSTBOARD_JWT_SECRET in production.
    Without it a random secret is generated and every restart invalidates
    previously issued tokens.
    """
    jwt_secret: str
    database_url: str = "sqlite:///database/postboard.db"
    jwt_algorithm: str = "HS256"
    password_work_factor: int = 10
    token_expiration_hours: Optional[int] = None  # None = tokens never expire
    log_dir: str = "logs"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    def __post_init__(self):
        if not self.jwt_secret:
            raise ValueError("jwt_secret must not be blank")
        if self.jwt_algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(
                f"Unsupported jwt_algorithm '{self.jwt_algorithm}'. "
                f"Must be one of: {', '.join(SUPPORTED_ALGORITHMS)}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unsupported log_level '{self.log_level}'. "
                f"Must be one of: {', '.join(LOG_LEVELS)}"
            )
        if not MIN_WORK_FACTOR <= self.password_work_factor <= MAX_WORK_FACTOR:
            raise ValueError(
                f"password_work_factor must be between {MIN_WORK_FACTOR} and {MAX_WORK_FACTOR}"
            )
        if self.token_expiration_hours is not None and self.token_expiration_hours <= 0:
            raise ValueError("token_expiration_hours must be positive when set")


def _EnvInt(name: str, default: Optional[int]) -> Optional[int]:
    """Read an integer environment variable, raising ValueError on garbage"""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got '{raw}'")


def LoadConfig() -> ServerConfig:
    """
    Build a ServerConfig from POSTBOARD_* environment variables

    Returns:
        ServerConfig: Immutable configuration object

    Raises:
        ValueError: If any variable holds an invalid value
    """
    jwt_secret = os.environ.get("POSTBOARD_JWT_SECRET")
    if not jwt_secret:
        logger.warning("POSTBOARD_JWT_SECRET not set, generating a random signing secret")
        jwt_secret = secrets.token_urlsafe(32)

    return ServerConfig(
        jwt_secret=jwt_secret,
        database_url=os.environ.get("POSTBOARD_DATABASE_URL", "sqlite:///database/postboard.db"),
        jwt_algorithm=os.environ.get("POSTBOARD_JWT_ALGORITHM", "HS256"),
        password_work_factor=_EnvInt("POSTBOARD_BCRYPT_ROUNDS", 10),
        token_expiration_hours=_EnvInt("POSTBOARD_TOKEN_EXPIRATION_HOURS", None),
        log_dir=os.environ.get("POSTBOARD_LOG_DIR", "logs"),
        log_level=os.environ.get("POSTBOARD_LOG_LEVEL", "INFO").upper(),
        host=os.environ.get("POSTBOARD_HOST", "0.0.0.0"),
        port=_EnvInt("POSTBOARD_PORT", 8000),
    )
