"""User-facing data transfer objects (never carry the password hash)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from pocketledger.domain.user import User


@dataclass(frozen=True)
class UserProfileDTO:
    id: UUID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> UserProfileDTO:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class AuthResultDTO:
    """Token issued at registration or login, plus the profile it belongs to."""

    token: str
    user: UserProfileDTO
