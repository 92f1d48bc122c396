"""In-memory user storage."""

import logging
import threading
import uuid

from lead_api.errors import ConflictError
from lead_api.models.user import UserRecord, default_name_for

logger = logging.getLogger(__name__)


class UserStore:
    """Process-lifetime mapping from email to ``UserRecord``.

    Email and id are both unique. All mutations and the duplicate checks they
    depend on happen under one lock, so two concurrent ``create`` calls for the
    same email cannot both succeed. Callers hash passwords before calling
    ``create`` so the lock is never held during hashing.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: dict[str, UserRecord] = {}
        self._ids: set[str] = set()

    def create(
        self,
        email: str,
        password_hash: str,
        name: str | None = None,
        user_id: str | None = None,
    ) -> UserRecord:
        """Insert a new user, or raise ``ConflictError`` if email or id is taken."""
        with self._lock:
            if email in self._users:
                raise ConflictError()
            if user_id is not None and user_id in self._ids:
                raise ConflictError()

            if user_id is None:
                user_id = uuid.uuid4().hex
                while user_id in self._ids:
                    user_id = uuid.uuid4().hex

            user = UserRecord(
                id=user_id,
                email=email,
                name=name or default_name_for(email),
                password_hash=password_hash,
            )
            self._users[email] = user
            self._ids.add(user_id)
        return user

    def get_by_email(self, email: str) -> UserRecord | None:
        """Get a user by email."""
        return self._users.get(email)

    def exists(self, email: str) -> bool:
        return email in self._users

    def id_exists(self, user_id: str) -> bool:
        return user_id in self._ids

    def list_all(self) -> list[UserRecord]:
        """All users in registration order."""
        with self._lock:
            return list(self._users.values())

    def clear(self) -> int:
        """Remove every user and return how many were removed."""
        with self._lock:
            count = len(self._users)
            self._users.clear()
            self._ids.clear()
        logger.info(f"Cleared {count} users from store")
        return count

    def __len__(self) -> int:
        return len(self._users)
