"""Exception hierarchy for TodoVault.

Every error raised by the core carries a human-readable message and an
optional details dict. The Flask error handlers in main.py translate
these into JSON responses; nothing below the HTTP layer knows about
status codes.
"""

from enum import Enum


class TodoVaultError(Exception):
    """Base class for all TodoVault errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ResourceNotFound(TodoVaultError):
    """Requested todo does not exist in the caller's list."""


class ValidationError(TodoVaultError):
    """Request payload could not be decoded or validated."""


class AuthenticationError(TodoVaultError):
    """Authentication failed."""


class InvalidCredentialsError(AuthenticationError):
    """Unknown username or wrong password (deliberately indistinguishable)."""

    def __init__(self, details: dict | None = None):
        super().__init__("Invalid username or password", details)


class HashingError(TodoVaultError):
    """Password hashing failed internally."""


class TokenErrorKind(str, Enum):
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"
    MALFORMED = "malformed"


class TokenError(TodoVaultError):
    """Token verification failed.

    Internal to session resolution; always mapped to a SessionError
    before it reaches the HTTP layer.
    """

    def __init__(self, kind: TokenErrorKind, message: str | None = None):
        super().__init__(message or f"Token rejected: {kind.value}", {"code": kind.value})
        self.kind = kind


class SessionErrorKind(str, Enum):
    UNAUTHORIZED = "unauthorized"
    BAD_REQUEST = "bad_request"


class SessionError(TodoVaultError):
    """Session carrier missing, unusable, or carrying a rejected token."""

    _messages = {
        SessionErrorKind.UNAUTHORIZED: "Unauthorized",
        SessionErrorKind.BAD_REQUEST: "Bad request",
    }

    def __init__(self, kind: SessionErrorKind):
        super().__init__(self._messages[kind])
        self.kind = kind
