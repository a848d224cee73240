"""Account, category and transaction schemas for API request/response models.

Request bodies carry every mutable field; PUT uses the same schema as POST
because updates replace the whole record.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pocketledger.domain.ledger import (
    Account,
    AccountType,
    Category,
    CategoryType,
    Transaction,
)
from pocketledger.domain.shared.time import to_utc
from pocketledger.presentation.api.schemas.common import NonBlankStr

# =============================================================================
# Requests
# =============================================================================


class AccountRequest(BaseModel):
    """Request schema for creating or replacing an account."""

    name: NonBlankStr = Field(..., description="Account name")
    type: AccountType = Field(..., description="CREDIT-CARD, BANK or CASH")
    balance: float = Field(..., description="Current balance")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Checking", "type": "BANK", "balance": 1250.0},
        },
    )

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump()


class CategoryRequest(BaseModel):
    """Request schema for creating or replacing a category."""

    name: NonBlankStr = Field(..., description="Category name")
    type: CategoryType = Field(..., description="EXPENSE or INCOME")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Groceries", "type": "EXPENSE"},
        },
    )

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump()


class TransactionRequest(BaseModel):
    """Request schema for creating or replacing a transaction.

    Dates without an offset are taken as UTC; ``YYYY-MM-DD`` means midnight.
    """

    amount: float = Field(..., description="Amount (always positive)")
    date: datetime = Field(..., description="ISO 8601 date or datetime")
    account: UUID = Field(..., description="Id of one of your accounts")
    category: UUID = Field(..., description="Id of one of your categories")
    description: Optional[str] = Field(None, description="Free-text note")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount": 50.0,
                "date": "2024-01-15T10:30:00Z",
                "account": "6f1c2b3a-0000-4000-8000-000000000001",
                "category": "6f1c2b3a-0000-4000-8000-000000000002",
                "description": "Weekly shopping",
            },
        },
    )

    @field_validator("date")
    @classmethod
    def date_in_utc(cls, value: datetime) -> datetime:
        return to_utc(value)

    def to_fields(self) -> dict[str, Any]:
        """Entity fields, with the references under their domain names."""
        return {
            "amount": self.amount,
            "date": self.date,
            "account_id": self.account,
            "category_id": self.category,
            "description": self.description,
        }


# =============================================================================
# Responses
# =============================================================================


class _OwnedResponse(BaseModel):
    id: UUID
    user_id: UUID
    is_deleted: bool
    created_at: datetime
    updated_at: datetime


class AccountResponse(_OwnedResponse):
    name: str
    type: AccountType
    balance: float

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResponse":
        return cls(**account.to_dict())


class CategoryResponse(_OwnedResponse):
    name: str
    type: CategoryType

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResponse":
        return cls(**category.to_dict())


class TransactionResponse(_OwnedResponse):
    """Transaction as returned to clients.

    ``account`` and ``category`` hold the referenced ids, mirroring the
    request body.
    """

    amount: float
    date: datetime
    account: UUID
    category: UUID
    description: Optional[str] = None

    @classmethod
    def from_entity(cls, txn: Transaction) -> "TransactionResponse":
        return cls(
            id=txn.id,
            user_id=txn.user_id,
            is_deleted=txn.is_deleted,
            created_at=txn.created_at,
            updated_at=txn.updated_at,
            amount=txn.amount,
            date=txn.date,
            account=txn.account_id,
            category=txn.category_id,
            description=txn.description,
        )
