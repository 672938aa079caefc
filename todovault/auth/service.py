"""Credential service: sign-up and sign-in.

Sign-up hashes the password and upserts it into the shared store; a repeat
sign-up for the same username silently replaces the previous hash.

Sign-in never reveals whether the username exists. Unknown users and wrong
passwords raise the same InvalidCredentialsError, and an unknown user still
pays for one bcrypt verification against a throwaway hash so response
timing does not tell the two apart.
"""

import logging
import threading
from datetime import datetime
from typing import TYPE_CHECKING

from ..exceptions import InvalidCredentialsError
from .hashing import PasswordHasher
from .token import TokenCodec

if TYPE_CHECKING:
    from ..store import SharedStore

logger = logging.getLogger(__name__)


class CredentialService:
    """Registers users and authenticates sign-in attempts."""

    def __init__(self, store: "SharedStore", hasher: PasswordHasher, codec: TokenCodec):
        self._store = store
        self._hasher = hasher
        self._codec = codec
        self._dummy_hash: str | None = None
        self._dummy_lock = threading.Lock()

    def sign_up(self, username: str, password: str) -> None:
        """
        Register a user, overwriting any existing record for username.

        Raises:
            HashingError: If password hashing fails internally
        """
        password_hash = self._hasher.hash(password)
        self._store.put_user_hash(username, password_hash)
        logger.info(f"User registered: {username}")

    def sign_in(self, username: str, password: str, now: datetime | None = None) -> str:
        """
        Authenticate credentials and issue a session token.

        Args:
            username: Username as given at sign-up
            password: Plain text password
            now: Issue time for the token (defaults to current UTC time)

        Returns:
            Signed session token

        Raises:
            InvalidCredentialsError: Unknown username or wrong password
        """
        password_hash = self._store.get_user_hash(username)
        if password_hash is None:
            self._hasher.verify(password, self._get_dummy_hash())
            logger.warning(f"Failed sign-in attempt for username: {username}")
            raise InvalidCredentialsError()

        if not self._hasher.verify(password, password_hash):
            logger.warning(f"Failed sign-in attempt for username: {username}")
            raise InvalidCredentialsError()

        token = self._codec.issue(username, now)
        logger.info(f"Successful sign-in: {username}")
        return token

    def _get_dummy_hash(self) -> str:
        with self._dummy_lock:
            if self._dummy_hash is None:
                self._dummy_hash = self._hasher.hash("dummy-password-for-timing")
            return self._dummy_hash
