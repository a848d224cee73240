from pocketledger.domain.ledger.entities import (
    Account,
    Category,
    LedgerEntity,
    Transaction,
)
from pocketledger.domain.ledger.exceptions import LedgerEntityNotFoundError
from pocketledger.domain.ledger.repositories import (
    AccountRepository,
    CategoryRepository,
    LedgerRepository,
    TransactionFilter,
    TransactionRepository,
)
from pocketledger.domain.ledger.types import AccountType, CategoryType

__all__ = [
    "Account",
    "AccountRepository",
    "AccountType",
    "Category",
    "CategoryRepository",
    "CategoryType",
    "LedgerEntity",
    "LedgerEntityNotFoundError",
    "LedgerRepository",
    "Transaction",
    "TransactionFilter",
    "TransactionRepository",
]
