from pocketledger.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
    Violation,
)

__all__ = [
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
    "Violation",
]
