"""SQLAlchemy implementation of AccountRepository."""

from typing import Any

from pocketledger.domain.ledger import Account, AccountRepository, AccountType
from pocketledger.infrastructure.persistence.sqlalchemy.models import AccountModel
from pocketledger.infrastructure.persistence.sqlalchemy.repositories.ledger_repository import (  # NOQA: E501
    LedgerRepositorySQLAlchemy,
)


class AccountRepositorySQLAlchemy(
    LedgerRepositorySQLAlchemy[Account],
    AccountRepository,
):
    model_cls = AccountModel

    def _columns_from_domain(self, entity: Account) -> dict[str, Any]:
        return {
            "name": entity.name,
            "type": AccountType(entity.type).value,
            "balance": entity.balance,
        }

    def _map_to_domain(self, model: AccountModel) -> Account:
        return Account(
            name=model.name,
            type=AccountType(model.type),
            balance=model.balance,
            **self._common_fields(model),
        )
