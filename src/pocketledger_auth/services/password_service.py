"""Password hashing service using bcrypt.

Provides one-way password hashing and verification. Strength rules
(minimum length etc.) are input validation and live in the request
schemas, not here.
"""

import bcrypt

from pocketledger_auth.exceptions import HashingError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    DEFAULT_ROUNDS = 10
    # bcrypt only reads the first 72 bytes of its input
    MAX_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations).
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        HashingError
            If the password is longer than MAX_BYTES or bcrypt rejects it
        """
        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise HashingError(msg)
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        except (ValueError, TypeError) as e:
            msg = "Error generating hashed password"
            raise HashingError(msg) from e
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise. Passwords longer than
        MAX_BYTES are never accepted for hashing, so they never match.

        Raises
        ------
        HashingError
            If the stored hash is malformed
        """
        if len(password.encode("utf-8")) > self.MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError) as e:
            msg = "Error comparing passwords"
            raise HashingError(msg) from e
