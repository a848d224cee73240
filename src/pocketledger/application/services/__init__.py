from pocketledger.application.services.ledger_service import (
    LedgerService,
    TransactionService,
    account_service,
    category_service,
    transaction_service,
)
from pocketledger.application.services.user_account_service import (
    UserAccountService,
)

__all__ = [
    "LedgerService",
    "TransactionService",
    "UserAccountService",
    "account_service",
    "category_service",
    "transaction_service",
]
