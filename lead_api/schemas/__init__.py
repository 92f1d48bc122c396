"""Pydantic schemas for API requests and responses."""

from lead_api.schemas.auth import (
    AuthResponse,
    ProfileResponse,
    UserExistsResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from lead_api.schemas.debug import ClearUsersResponse, DebugUser, DebugUserList
from lead_api.schemas.upload import UploadedFile, UploadResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "ProfileResponse",
    "UserExistsResponse",
    "DebugUser",
    "DebugUserList",
    "ClearUsersResponse",
    "UploadedFile",
    "UploadResponse",
]
