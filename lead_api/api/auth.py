"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from lead_api.api.dependencies import get_auth_service, get_user_store
from lead_api.schemas.auth import (
    AuthResponse,
    UserExistsResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from lead_api.services.auth import AuthService
from lead_api.services.user_store import UserStore

router = APIRouter(prefix="/api/auth", tags=["auth"])


# Handlers are sync so bcrypt runs in the threadpool, off the event loop.
@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    user, token = auth_service.register(
        user_data.email,
        user_data.password,
        name=user_data.name,
        user_id=user_data.id,
    )
    return AuthResponse(
        message="User created successfully",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    user, token = auth_service.login(credentials.email, credentials.password)
    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.get("/check/{email}", response_model=UserExistsResponse)
def check_user_exists(
    email: str,
    users: Annotated[UserStore, Depends(get_user_store)],
):
    """Check whether an email is registered."""
    return UserExistsResponse(exists=users.exists(email), email=email)
