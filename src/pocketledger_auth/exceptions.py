"""Authentication exceptions.

These exceptions are raised by the pocketledger_auth package and are
translated by the application layer (UserAccountService) and the API
bearer dependency.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Raised when a JWT token signature is valid but its expiry has passed."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class HashingError(AuthError):
    """Raised when bcrypt fails to hash or compare a password."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message)
