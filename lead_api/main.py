"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import timedelta
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from lead_api.api import auth, debug, health, upload, user
from lead_api.api.error_handlers import register_exception_handlers
from lead_api.api.middleware import register_middleware
from lead_api.config import Settings, get_settings
from lead_api.services.auth import AuthService
from lead_api.services.auth_guard import AuthGuard
from lead_api.services.passwords import PasswordHasher
from lead_api.services.tokens import TokenService
from lead_api.services.uploads import VideoStorage
from lead_api.services.user_store import UserStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )
    for noisy in ("passlib", "multipart", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    settings: Settings = app.state.settings
    logger.info(
        f"API server started on http://{settings.host}:{settings.port} "
        f"(environment={settings.environment})"
    )
    yield
    logger.info(f"API server stopping; {len(app.state.user_store)} users dropped from memory")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an application with its own user store and services."""
    settings = settings or get_settings()

    app = FastAPI(
        title="AI Lead Strategies API",
        description="User registration, bearer token auth and video uploads",
        version="0.1.0",
        lifespan=lifespan,
    )

    users = UserStore()
    hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    tokens = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=timedelta(minutes=settings.jwt_expiration_minutes),
    )
    storage = VideoStorage(settings.upload_dir, settings.max_upload_bytes)

    app.state.settings = settings
    app.state.user_store = users
    app.state.auth_guard = AuthGuard(tokens)
    app.state.auth_service = AuthService(users, hasher, tokens)
    app.state.video_storage = storage

    register_middleware(app, settings)
    register_exception_handlers(app)

    # Register routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(user.router)
    app.include_router(debug.router)
    app.include_router(upload.router)

    app.mount("/uploads", StaticFiles(directory=storage.ensure_dir()), name="uploads")

    if settings.frontend_dir and Path(settings.frontend_dir).is_dir():
        app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")

    return app


def run() -> None:
    """Run the API with uvicorn. Fails fast if settings are invalid."""
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        "lead_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
