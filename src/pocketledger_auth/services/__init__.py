"""Authentication services.

Provides password hashing and JWT token management.
"""

from pocketledger_auth.services.jwt_service import JWTService
from pocketledger_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
]
