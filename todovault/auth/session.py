"""Session resolution: token carrier -> authenticated username.

The token travels in the `token` cookie set at sign-in. An
`Authorization: Bearer <token>` header is accepted as a fallback carrier
for non-browser clients; the cookie wins when both are present.

Failure mapping:
- no carrier at all                         -> Unauthorized
- Authorization header with another scheme  -> Unauthorized
- carrier present but unusable              -> Bad request
- token expired or signature mismatch       -> Unauthorized
- token structurally broken                 -> Bad request
"""

import logging
from collections.abc import Mapping
from datetime import datetime

from ..exceptions import SessionError, SessionErrorKind, TokenError, TokenErrorKind
from .token import TokenCodec

logger = logging.getLogger(__name__)

_TOKEN_ERROR_MAP = {
    TokenErrorKind.EXPIRED: SessionErrorKind.UNAUTHORIZED,
    TokenErrorKind.INVALID_SIGNATURE: SessionErrorKind.UNAUTHORIZED,
    TokenErrorKind.MALFORMED: SessionErrorKind.BAD_REQUEST,
}


class SessionResolver:
    """Extracts and verifies the session token of an inbound request."""

    def __init__(self, codec: TokenCodec, cookie_name: str = "token"):
        self._codec = codec
        self.cookie_name = cookie_name

    def extract_token(
        self,
        cookies: Mapping[str, str] | None,
        headers: Mapping[str, str] | None = None,
    ) -> str:
        """
        Pull the raw token string out of the request carriers.

        Raises:
            SessionError: UNAUTHORIZED if no carrier is present,
                BAD_REQUEST if a carrier is present but unusable
        """
        cookie_value = (cookies or {}).get(self.cookie_name)
        if cookie_value is not None:
            if not isinstance(cookie_value, str) or not cookie_value:
                raise SessionError(SessionErrorKind.BAD_REQUEST)
            return cookie_value

        auth_header = (headers or {}).get("Authorization")
        if auth_header is None:
            raise SessionError(SessionErrorKind.UNAUTHORIZED)

        # Other schemes (Basic from a proxy, etc.) are not session carriers
        parts = auth_header.split(" ")
        if parts[0].lower() != "bearer":
            raise SessionError(SessionErrorKind.UNAUTHORIZED)
        if len(parts) != 2 or not parts[1]:
            raise SessionError(SessionErrorKind.BAD_REQUEST)
        return parts[1]

    def resolve(
        self,
        cookies: Mapping[str, str] | None,
        headers: Mapping[str, str] | None = None,
        now: datetime | None = None,
    ) -> str:
        """
        Resolve the authenticated username for a request.

        Args:
            cookies: Request cookies
            headers: Request headers (checked for a Bearer token)
            now: Verification time (defaults to current UTC time)

        Returns:
            Username embedded in the verified token

        Raises:
            SessionError: UNAUTHORIZED or BAD_REQUEST
        """
        token = self.extract_token(cookies, headers)
        try:
            return self._codec.verify(token, now)
        except TokenError as e:
            logger.warning(f"Session token rejected: {e.kind.value}")
            raise SessionError(_TOKEN_ERROR_MAP[e.kind]) from e
