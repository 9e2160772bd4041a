"""
Postboard Server - Main FastAPI Application

This module assembles the Postboard REST API: configuration, logging,
database lifecycle, exception handlers and routers.
"""

import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

import database
from auth import TokenService, UnauthorizedResponse
from config import ServerConfig, LoadConfig
from exceptions import AuthFailure, StorageConflict, RecordNotFound
from managers.database_manager import DatabaseManager
from passwords import PasswordHasher
from routes import status as status_routes, auth as auth_routes, posts as posts_routes

logger = logging.getLogger(__name__)


# ==================== Logging ====================

def ConfigureLogging(config: ServerConfig):
    """
    Configure logging to write to both console and a dated, rotating log file

    Args:
        config: Server configuration (log_dir, log_level)
    """
    logs_dir = Path(config.log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_filename = logs_dir / f"postboard-server-{datetime.now().strftime('%Y-%m-%d')}.log"

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            # Console handler
            logging.StreamHandler(),
            # File handler with rotation (max 10MB per file, keep 10 backup files)
            RotatingFileHandler(
                log_filename,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=10,
                encoding='utf-8'
            )
        ]
    )


# ==================== Exception Handlers ====================

async def HandleAuthFailure(request: Request, exc: AuthFailure) -> JSONResponse:
    """Every authentication failure becomes the same 401"""
    logger.warning(f"Rejected {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    return UnauthorizedResponse()


async def HandleStorageConflict(request: Request, exc: StorageConflict) -> JSONResponse:
    logger.warning(f"Storage conflict on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"status": "Error", "msg": str(exc)},
    )


async def HandleRecordNotFound(request: Request, exc: RecordNotFound) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"status": "Error", "msg": f"{exc.resource} not found"},
    )


# ==================== Application Factory ====================

def CreateApp(config: ServerConfig) -> FastAPI:
    """
    Build the FastAPI application for a configuration

    The config is fixed for the life of the app. The token service and
    password hasher built from it are stored on app.state.

    Args:
        config: Server configuration

    Returns:
        FastAPI: Configured application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        FastAPI lifespan event handler for startup and shutdown
        Manages database initialization and cleanup
        """
        # Startup
        logger.info("Postboard Server starting up...")

        database.db_manager = DatabaseManager(config.database_url)
        database.db_manager.InitializeDatabase()
        logger.info("Database initialized successfully")

        if config.token_expiration_hours:
            logger.info(f"Issued tokens expire after {config.token_expiration_hours} hours")
        else:
            logger.info("Issued tokens do not expire")

        logger.info("Server startup complete")

        yield

        # Shutdown
        logger.info("Postboard Server shutting down...")
        database.db_manager.Dispose()
        logger.info("Shutdown complete")

    app = FastAPI(
        title="Postboard Server",
        description="Blog posts REST API with password login and bearer token authorization",
        version=status_routes.SERVICE_VERSION,
        lifespan=lifespan
    )

    app.state.config = config
    app.state.token_service = TokenService.FromConfig(config)
    app.state.password_hasher = PasswordHasher(config.password_work_factor)

    # ==================== CORS Middleware ====================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ==================== Exception Handlers ====================

    app.add_exception_handler(AuthFailure, HandleAuthFailure)
    app.add_exception_handler(StorageConflict, HandleStorageConflict)
    app.add_exception_handler(RecordNotFound, HandleRecordNotFound)

    # ==================== Include Routers ====================

    app.include_router(status_routes.router)
    app.include_router(auth_routes.router)
    app.include_router(posts_routes.router)

    return app


# ==================== Main Entry Point ====================

if __name__ == "__main__":
    """
    Run the server using uvicorn
    """
    server_config = LoadConfig()
    ConfigureLogging(server_config)

    logger.info("Starting Postboard Server...")

    uvicorn.run(
        CreateApp(server_config),
        host=server_config.host,
        port=server_config.port,
        log_level=server_config.log_level.lower()
    )
