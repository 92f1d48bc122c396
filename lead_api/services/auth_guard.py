"""Bearer token gate for protected routes.

``AuthGuard.check`` never raises: it returns ``Allowed`` with the decoded
identity or ``Rejected`` with a reason, and the caller decides how to
short-circuit the request.
"""

import logging
from dataclasses import dataclass

from lead_api.errors import TokenInvalidError
from lead_api.services.tokens import TokenClaims, TokenService

logger = logging.getLogger(__name__)

NO_TOKEN = "No token provided"
INVALID_TOKEN = "Invalid or expired token"


@dataclass(frozen=True)
class Allowed:
    identity: TokenClaims


@dataclass(frozen=True)
class Rejected:
    reason: str


AuthOutcome = Allowed | Rejected


class AuthGuard:
    """Verify the bearer token of an incoming request."""

    def __init__(self, tokens: TokenService):
        self.tokens = tokens

    def check(self, token: str | None) -> AuthOutcome:
        """Check the bearer credential taken from the ``Authorization`` header."""
        if not token:
            return Rejected(NO_TOKEN)
        try:
            identity = self.tokens.verify(token)
        except TokenInvalidError:
            return Rejected(INVALID_TOKEN)
        return Allowed(identity)
