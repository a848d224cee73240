"""User domain exceptions."""

from uuid import UUID

from pocketledger.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)


class DuplicateUserError(DomainException):
    """Email already registered to a non-deleted user."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message="User already registered",
            code=ErrorCode.DUPLICATE_USER,
            details={"email": email},
        )
        self.email = email


class InvalidCredentialsError(DomainException):
    """Login or password check failed.

    Unknown email and wrong password raise the same message on purpose.
    """

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message=message, code=ErrorCode.INVALID_CREDENTIALS)


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: UUID | str) -> None:
        super().__init__(
            message="User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )
        self.user_id = user_id
