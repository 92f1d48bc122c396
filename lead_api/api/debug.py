"""Debug API endpoints for development and troubleshooting.

Disabled (403) outside development and test environments.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from lead_api.api.dependencies import get_user_store, require_debug_routes
from lead_api.schemas.debug import ClearUsersResponse, DebugUser, DebugUserList
from lead_api.services.user_store import UserStore

router = APIRouter(
    prefix="/api/debug",
    tags=["debug"],
    dependencies=[Depends(require_debug_routes)],
)


@router.get("/users", response_model=DebugUserList)
def list_users(users: Annotated[UserStore, Depends(get_user_store)]):
    """List all registered users in registration order."""
    records = users.list_all()
    return DebugUserList(
        count=len(records),
        users=[
            DebugUser(id=user.id, email=user.email, name=user.name, created_at=user.created_at)
            for user in records
        ],
    )


@router.delete("/users", response_model=ClearUsersResponse)
def clear_users(users: Annotated[UserStore, Depends(get_user_store)]):
    """Remove every registered user."""
    count = users.clear()
    return ClearUsersResponse(message=f"Cleared {count} users")
