"""Ledger repository interfaces.

Implementations are user-scoped via UserContext: every query filters by
the context's user_id, so callers never pass an owner explicitly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Optional, TypeVar
from uuid import UUID

from pocketledger.domain.ledger.entities import (
    Account,
    Category,
    LedgerEntity,
    Transaction,
)

EntityT = TypeVar("EntityT", bound=LedgerEntity)


@dataclass(frozen=True)
class TransactionFilter:
    """Optional restrictions for listing transactions."""

    account_id: Optional[UUID] = None
    category_id: Optional[UUID] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


class LedgerRepository(ABC, Generic[EntityT]):
    """Repository interface shared by Account, Category and Transaction."""

    @abstractmethod
    async def save(self, entity: EntityT) -> None:
        """Insert or update an entity for the current user."""

    @abstractmethod
    async def find_by_id(
        self,
        entity_id: UUID,
        include_deleted: bool = False,
    ) -> Optional[EntityT]:
        """Find an owned entity by ID."""

    @abstractmethod
    async def find_all(self) -> list[EntityT]:
        """Find all owned, non-deleted entities in the entity's list order."""


class AccountRepository(LedgerRepository[Account]):
    """Accounts, listed in creation order."""


class CategoryRepository(LedgerRepository[Category]):
    """Categories, listed by type ascending."""


class TransactionRepository(LedgerRepository[Transaction]):
    """Transactions, listed newest first."""

    @abstractmethod
    async def find_filtered(self, criteria: TransactionFilter) -> list[Transaction]:
        """Find owned, non-deleted transactions matching ``criteria``."""
