"""Authentication service: register, login and profile lookup."""

import logging

from lead_api.errors import (
    AuthenticationError,
    ConflictError,
    ErrorKind,
    NotFoundError,
    ValidationError,
)
from lead_api.models.user import UserRecord
from lead_api.services.passwords import PasswordHasher
from lead_api.services.tokens import TokenService
from lead_api.services.user_store import UserStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Orchestrates the user store, password hasher and token service."""

    def __init__(self, users: UserStore, hasher: PasswordHasher, tokens: TokenService):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def register(
        self,
        email: str | None,
        password: str | None,
        name: str | None = None,
        user_id: str | None = None,
    ) -> tuple[UserRecord, str]:
        """Create a user and return it with a freshly issued token."""
        if not email or not password:
            raise ValidationError("Email and password are required")

        # Cheap early rejection; the store repeats both checks atomically on insert
        if self.users.exists(email) or (user_id and self.users.id_exists(user_id)):
            raise ConflictError()

        password_hash = self.hasher.hash(password)
        user = self.users.create(email, password_hash, name=name or None, user_id=user_id or None)
        token = self.tokens.issue(user.id, user.email)

        logger.info(f"User registered successfully: {user.email} (ID: {user.id})")
        return user, token

    def login(self, email: str | None, password: str | None) -> tuple[UserRecord, str]:
        """Check credentials and return the user with a new token.

        Unknown email and wrong password raise the same error.
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.users.get_by_email(email)
        if user is None:
            self.hasher.dummy_verify(password)
            logger.info(f"Login failed for {email}: no such user")
            raise AuthenticationError(INVALID_CREDENTIALS, kind=ErrorKind.INVALID_CREDENTIALS)

        if not self.hasher.verify(password, user.password_hash):
            logger.info(f"Login failed for {email}: wrong password")
            raise AuthenticationError(INVALID_CREDENTIALS, kind=ErrorKind.INVALID_CREDENTIALS)

        token = self.tokens.issue(user.id, user.email)
        logger.info(f"Login: {user.email} (ID: {user.id})")
        return user, token

    def profile(self, email: str, user_id: str) -> UserRecord:
        """Resolve the user behind an authenticated identity.

        The id must match too: a token issued before a store clear must not
        resolve to a later account registered under the same email.
        """
        user = self.users.get_by_email(email)
        if user is None or user.id != user_id:
            raise NotFoundError("User not found")
        return user
