"""Error kinds and the application exception hierarchy.

Every failure a handler can produce is one of the exceptions below. Each carries
an ``ErrorKind`` which fixes both the HTTP status code and the ``code`` field of
the JSON error body, so callers and tests can match on the kind instead of on
message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of error codes exposed in response bodies."""

    MISSING_REQUIRED_FIELDS = "missing_required_fields"
    INVALID_REQUEST = "invalid_request"
    INVALID_FILE_TYPE = "invalid_file_type"
    ALREADY_EXISTS = "already_exists"
    UNAUTHORIZED = "unauthorized"
    INVALID_CREDENTIALS = "invalid_credentials"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    INTERNAL_ERROR = "internal_error"

    @property
    def status_code(self) -> int:
        """HTTP status code for this kind."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.MISSING_REQUIRED_FIELDS: 400,
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.INVALID_FILE_TYPE: 400,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.PAYLOAD_TOO_LARGE: 413,
    ErrorKind.INTERNAL_ERROR: 500,
}


class AppError(Exception):
    """Base class for errors rendered as ``{"error": ..., "code": ...}``."""

    default_kind = ErrorKind.INTERNAL_ERROR
    default_message = "Internal server error"

    def __init__(
        self,
        message: str | None = None,
        kind: ErrorKind | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.message = message or self.default_message
        self.kind = kind or self.default_kind
        self.headers = headers
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "code": self.kind.value}


class ValidationError(AppError):
    """Missing or malformed input (400)."""

    default_kind = ErrorKind.MISSING_REQUIRED_FIELDS
    default_message = "Email and password are required"


class ConflictError(AppError):
    """Duplicate identity (409)."""

    default_kind = ErrorKind.ALREADY_EXISTS
    default_message = "A user with this ID or email already exists"


class AuthenticationError(AppError):
    """Bad credentials or bad token (401)."""

    default_kind = ErrorKind.UNAUTHORIZED
    default_message = "Authentication required"


class TokenInvalidError(AuthenticationError):
    """Token is malformed, forged or expired. The cases are deliberately not distinguished."""

    default_message = "Invalid or expired token"


class NotFoundError(AppError):
    default_kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class ForbiddenError(AppError):
    default_kind = ErrorKind.FORBIDDEN
    default_message = "Forbidden in production"


class PayloadTooLargeError(AppError):
    default_kind = ErrorKind.PAYLOAD_TOO_LARGE
    default_message = "Payload too large"


class InternalError(AppError):
    """Unexpected failure (500)."""


class HashFormatError(InternalError):
    """A stored password hash or the candidate password is not usable input."""

    default_message = "Invalid password hash"
