"""PocketLedger Auth - Generic authentication infrastructure.

This package is independent of the ledger domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    pocketledger_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from pocketledger_auth import PasswordHashingService, JWTService
"""

from pocketledger_auth.exceptions import (
    AuthError,
    HashingError,
    InvalidTokenError,
    TokenExpiredError,
)
from pocketledger_auth.schemas import TokenPayload
from pocketledger_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "HashingError",
    "InvalidTokenError",
    "TokenExpiredError",
]
