"""Debug endpoint schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DebugUser(BaseModel):
    """User row as listed by the debug endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    email: str
    name: str
    created_at: datetime


class DebugUserList(BaseModel):
    count: int
    users: list[DebugUser]


class ClearUsersResponse(BaseModel):
    message: str
    service: str = "user"
