"""Password hashing and verification."""

import logging
import secrets

from passlib.context import CryptContext

from lead_api.errors import ErrorKind, HashFormatError, ValidationError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted bcrypt hashing through passlib.

    Each ``hash`` call draws a fresh salt, so hashing the same password twice
    gives two different strings that both verify.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)
        # Verified against when the user does not exist, to keep login timing uniform
        self._dummy_hash = self._context.hash(secrets.token_urlsafe(16))

    def hash(self, plaintext: str) -> str:
        """Hash a password. The result embeds algorithm, cost and salt."""
        if not isinstance(plaintext, str):
            raise HashFormatError("Password must be a string")
        try:
            return self._context.hash(plaintext)
        except ValueError as e:
            # bcrypt refuses some inputs, e.g. passwords containing NUL bytes
            logger.info(f"Password rejected by hasher: {e}")
            raise ValidationError("Invalid password", kind=ErrorKind.INVALID_REQUEST) from None

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Verify a password against its hash.

        Returns False for strings that are not a recognised hash. Raises
        ``HashFormatError`` when either argument is not usable at all.
        """
        if not isinstance(plaintext, str):
            raise HashFormatError("Password must be a string")
        if not isinstance(hashed, str) or not hashed:
            raise HashFormatError()
        try:
            return self._context.verify(plaintext, hashed)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password verification failed: {e}")
            return False

    def dummy_verify(self, plaintext: str) -> None:
        """Spend the cost of a real verification and discard the result.

        Fails the same way ``verify`` does, so unusable passwords behave alike
        for known and unknown users.
        """
        try:
            self._context.verify(plaintext, self._dummy_hash)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password verification failed: {e}")
