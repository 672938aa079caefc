"""JWT session tokens.

Tokens are HS256-signed JWTs carrying two claims:
- username: the authenticated identity
- exp: expiry as Unix seconds (issue time + TTL, default 5 minutes)

Verification needs no server-side lookup. Every failure is reported as a
TokenError with one of three kinds:
- INVALID_SIGNATURE: payload does not match the signature for our key
- MALFORMED: not decodable as a JWT, wrong algorithm, or bad/missing claims
- EXPIRED: exp <= now

Callers pass `now` explicitly so expiry is testable; it defaults to the
current UTC time.
"""

import logging
from datetime import datetime, timedelta

import jwt

from ..exceptions import TokenError, TokenErrorKind
from ..utils import isodatetime
from .schemas import TokenClaims

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["username", "exp"]


class TokenCodec:
    """Issues and verifies signed, self-contained, expiring tokens."""

    def __init__(
        self,
        secret_key: str,
        ttl: timedelta = timedelta(minutes=5),
        algorithm: str = "HS256",
    ):
        """Initialize the codec.

        Args:
            secret_key: Process-wide signing secret (from configuration)
            ttl: Lifetime of issued tokens
            algorithm: JWT signing algorithm; only this one is accepted
        """
        self._secret_key = secret_key
        self.ttl = ttl
        self.algorithm = algorithm

    def expiry_for(self, now: datetime | None = None) -> datetime:
        """Expiry that issue() embeds for the same `now` (second precision)."""
        if now is None:
            now = isodatetime.utcnow()
        return isodatetime.from_unix(isodatetime.to_unix(now + self.ttl))

    def issue(self, username: str, now: datetime | None = None) -> str:
        """
        Issue a signed token for username.

        Args:
            username: Identity claim to embed
            now: Issue time (defaults to current UTC time)

        Returns:
            Encoded JWT string
        """
        expires_at = self.expiry_for(now)
        payload = {
            "username": username,
            "exp": isodatetime.to_unix(expires_at),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def decode_claims(self, token: str, now: datetime | None = None) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            TokenError: kind INVALID_SIGNATURE, MALFORMED or EXPIRED
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                # exp is checked below against the caller's clock
                options={"verify_exp": False, "require": REQUIRED_CLAIMS},
            )
        except jwt.InvalidSignatureError:
            logger.debug("Token signature mismatch")
            raise TokenError(TokenErrorKind.INVALID_SIGNATURE)
        except jwt.InvalidTokenError as e:
            logger.debug(f"Undecodable token: {e}")
            raise TokenError(TokenErrorKind.MALFORMED)

        username = payload["username"]
        exp = payload["exp"]
        if not isinstance(username, str) or isinstance(exp, bool) or not isinstance(exp, (int, float)):
            raise TokenError(TokenErrorKind.MALFORMED)
        try:
            expires_at = isodatetime.from_unix(exp)
        except (OverflowError, OSError, ValueError):
            raise TokenError(TokenErrorKind.MALFORMED)

        if now is None:
            now = isodatetime.utcnow()
        if exp <= isodatetime.as_utc(now).timestamp():
            raise TokenError(TokenErrorKind.EXPIRED)

        return TokenClaims(username=username, expires_at=expires_at)

    def verify(self, token: str, now: datetime | None = None) -> str:
        """
        Verify a token and return the embedded username.

        Raises:
            TokenError: kind INVALID_SIGNATURE, MALFORMED or EXPIRED
        """
        return self.decode_claims(token, now).username
