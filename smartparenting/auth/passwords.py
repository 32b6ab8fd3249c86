"""One-way password hashing with bcrypt."""

import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a secret.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class PasswordHasher:
    """Hashes and verifies passwords.

    Args:
        rounds: bcrypt cost factor (log2 of the iteration count).
    """

    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when ``password`` matches ``password_hash``.

        A malformed stored hash counts as a mismatch.
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash could not be parsed")
            return False
