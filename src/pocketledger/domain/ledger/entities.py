"""Ledger entities owned by a single user.

All three entities share the same lifecycle: created for one owner,
mutated by wholesale replacement, and soft-deleted by setting
``is_deleted``. Rows are never physically removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, ClassVar, Optional
from uuid import UUID, uuid4

from pocketledger.domain.ledger.types import AccountType, CategoryType
from pocketledger.domain.shared.time import utc_now


@dataclass(kw_only=True)
class LedgerEntity:
    """Fields and behaviour common to every owned record."""

    MUTABLE_FIELDS: ClassVar[tuple[str, ...]] = ()
    ENTITY_NAME: ClassVar[str] = "Entity"

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    is_deleted: bool = False
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def replace_fields(self, values: dict[str, Any]) -> None:
        """Overwrite every mutable field; keys missing from ``values`` become None."""
        for name in self.MUTABLE_FIELDS:
            setattr(self, name, values.get(name))
        self.updated_at = utc_now()

    def mark_deleted(self) -> None:
        self.is_deleted = True
        self.updated_at = utc_now()

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(kw_only=True)
class Account(LedgerEntity):
    """A bank account, credit card or cash wallet.

    ``balance`` is user-managed and never derived from transactions.
    """

    MUTABLE_FIELDS: ClassVar[tuple[str, ...]] = ("name", "type", "balance")
    ENTITY_NAME: ClassVar[str] = "Account"

    name: str
    type: AccountType
    balance: float


@dataclass(kw_only=True)
class Category(LedgerEntity):
    MUTABLE_FIELDS: ClassVar[tuple[str, ...]] = ("name", "type")
    ENTITY_NAME: ClassVar[str] = "Category"

    name: str
    type: CategoryType


@dataclass(kw_only=True)
class Transaction(LedgerEntity):
    """A dated amount booked against one account and one category.

    Account and category must belong to the same user as the transaction.
    """

    MUTABLE_FIELDS: ClassVar[tuple[str, ...]] = (
        "amount",
        "date",
        "account_id",
        "category_id",
        "description",
    )
    ENTITY_NAME: ClassVar[str] = "Transaction"

    amount: float
    date: datetime
    account_id: UUID
    category_id: UUID
    description: Optional[str] = None
