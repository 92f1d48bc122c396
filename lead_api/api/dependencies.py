"""FastAPI dependencies for services and authentication."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from lead_api.config import Settings
from lead_api.errors import AuthenticationError, ForbiddenError
from lead_api.services.auth import AuthService
from lead_api.services.auth_guard import AuthGuard, Rejected
from lead_api.services.tokens import TokenClaims
from lead_api.services.uploads import VideoStorage
from lead_api.services.user_store import UserStore

logger = logging.getLogger(__name__)

# Missing header or non-Bearer scheme gives None, reported as "No token provided"
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_auth_guard(request: Request) -> AuthGuard:
    return request.app.state.auth_guard


def get_video_storage(request: Request) -> VideoStorage:
    return request.app.state.video_storage


def _authenticate(
    request: Request,
    guard: AuthGuard,
    credentials: HTTPAuthorizationCredentials | None,
) -> TokenClaims:
    outcome = guard.check(credentials.credentials if credentials else None)
    if isinstance(outcome, Rejected):
        logger.debug(f"Rejected {request.method} {request.url.path}: {outcome.reason}")
        raise AuthenticationError(outcome.reason, headers={"WWW-Authenticate": "Bearer"})
    request.state.identity = outcome.identity
    return outcome.identity


def get_current_identity(
    request: Request,
    guard: Annotated[AuthGuard, Depends(get_auth_guard)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Get the identity from the bearer token, or respond 401."""
    return _authenticate(request, guard, credentials)


def get_upload_identity(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
    guard: Annotated[AuthGuard, Depends(get_auth_guard)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims | None:
    """Bearer identity for uploads, enforced only when ``upload_requires_auth`` is set."""
    if not settings.upload_requires_auth:
        return None
    return _authenticate(request, guard, credentials)


def require_debug_routes(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> None:
    """Block debug endpoints outside development and test."""
    if not settings.debug_routes_enabled:
        raise ForbiddenError("Forbidden in production")
