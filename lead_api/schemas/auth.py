"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserRegister(BaseModel):
    """User registration request.

    Fields are optional here so that missing values produce the
    ``missing_required_fields`` error rather than a generic validation error.
    """

    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)
    name: str | None = Field(None, max_length=255)
    id: str | None = Field(None, max_length=64)


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)


class UserResponse(BaseModel):
    """Public user information. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str


class ProfileResponse(UserResponse):
    """Profile of the authenticated user."""


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    message: str
    token: str
    user: UserResponse


class UserExistsResponse(BaseModel):
    exists: bool
    email: str
    service: str = "user"
