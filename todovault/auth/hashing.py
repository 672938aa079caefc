"""Password hashing with bcrypt.

Each hash embeds its own random salt and work factor, so hashing the same
password twice yields two different strings that both verify.
"""

import logging

import bcrypt

from ..exceptions import HashingError

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8", "surrogatepass")[:BCRYPT_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """Salted, tunable-cost password hashing."""

    def __init__(self, rounds: int = 12):
        """Initialize the hasher.

        Args:
            rounds: bcrypt work factor (log2 of the iteration count)
        """
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a password with a fresh random salt.

        Passwords longer than 72 bytes are truncated, matching bcrypt's
        historical behaviour, so user input never makes this fail.

        Returns:
            60-character bcrypt hash string ($2b$...)

        Raises:
            HashingError: If bcrypt itself fails (e.g. no entropy source)
        """
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            hashed = bcrypt.hashpw(_encode(password), salt)
        except (ValueError, OSError) as e:
            logger.error(f"Password hashing failed: {e}")
            raise HashingError("Failed to hash password") from e
        return hashed.decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """
        Check a password against a stored hash in constant time.

        Returns:
            True on match; False on mismatch or if hashed is not a valid
            bcrypt hash
        """
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            return False
