"""User record model."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """A registered user. Records are never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    name: str
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


def default_name_for(email: str) -> str:
    """Default display name: the local part of the email address."""
    return email.split("@", 1)[0]
