"""User API endpoints (bearer token required)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from lead_api.api.dependencies import get_auth_service, get_current_identity
from lead_api.schemas.auth import ProfileResponse
from lead_api.services.auth import AuthService
from lead_api.services.tokens import TokenClaims

router = APIRouter(prefix="/api/user", tags=["user"])


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    identity: Annotated[TokenClaims, Depends(get_current_identity)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Get the authenticated user's profile."""
    return auth_service.profile(identity.email, identity.user_id)
