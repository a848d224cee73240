"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the current authenticated user.

    This is created once per request from the verified bearer token and
    passed to repositories. Repositories use the user_id to filter all
    queries to the current user's data.
    """

    user_id: UUID

    @classmethod
    def from_user_id(cls, user_id: UUID) -> UserContext:
        return cls(user_id=user_id)

    def __str__(self) -> str:
        return f"UserContext({self.user_id})"
