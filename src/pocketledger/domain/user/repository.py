"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from pocketledger.domain.user.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Lookups ignore soft-deleted users.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a non-deleted user by ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a non-deleted user by exact email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or update a user."""
