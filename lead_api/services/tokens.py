"""Bearer token issuance and verification (HS256 JWTs)."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from lead_api.errors import TokenInvalidError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Identity decoded from a verified token."""

    user_id: str
    email: str
    issued_at: datetime
    expires_at: datetime


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenService:
    """Issue and verify signed, expiring bearer tokens.

    Tokens are stateless: nothing is stored server side and validity depends
    only on the signature and the ``exp`` claim at verification time.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=7),
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in
        self._clock = clock

    def issue(self, user_id: str, email: str) -> str:
        """Create a signed token for ``user_id``/``email``."""
        issued_at = self._clock()
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(to_encode, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a token.

        Raises ``TokenInvalidError`` for malformed, forged or expired tokens
        without saying which.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require_sub": True, "require_exp": True, "require_iat": True},
            )
        except JWTError as e:
            logger.debug(f"Token rejected: {e}")
            raise TokenInvalidError() from None

        email = payload.get("email")
        if not isinstance(email, str) or not email:
            raise TokenInvalidError()

        expires_at = datetime.fromtimestamp(payload["exp"], UTC)
        if self._clock() >= expires_at:
            raise TokenInvalidError()

        return TokenClaims(
            user_id=payload["sub"],
            email=email,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=expires_at,
        )
