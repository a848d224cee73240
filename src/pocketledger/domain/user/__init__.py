from pocketledger.domain.user.exceptions import (
    DuplicateUserError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from pocketledger.domain.user.repository import UserRepository
from pocketledger.domain.user.user import User

__all__ = [
    "DuplicateUserError",
    "InvalidCredentialsError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
