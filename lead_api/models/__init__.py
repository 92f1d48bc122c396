"""In-memory record types."""

from lead_api.models.user import UserRecord

__all__ = [
    "UserRecord",
]
