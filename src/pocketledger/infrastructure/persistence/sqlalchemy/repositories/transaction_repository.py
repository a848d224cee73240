"""SQLAlchemy implementation of TransactionRepository."""

from typing import Any

from pocketledger.domain.ledger import (
    Transaction,
    TransactionFilter,
    TransactionRepository,
)
from pocketledger.domain.shared.time import ensure_tz_aware, to_utc
from pocketledger.infrastructure.persistence.sqlalchemy.models import TransactionModel
from pocketledger.infrastructure.persistence.sqlalchemy.repositories.ledger_repository import (  # NOQA: E501
    LedgerRepositorySQLAlchemy,
)


class TransactionRepositorySQLAlchemy(
    LedgerRepositorySQLAlchemy[Transaction],
    TransactionRepository,
):
    model_cls = TransactionModel

    async def find_filtered(self, criteria: TransactionFilter) -> list[Transaction]:
        stmt = self._visible()
        if criteria.account_id is not None:
            stmt = stmt.where(TransactionModel.account_id == criteria.account_id)
        if criteria.category_id is not None:
            stmt = stmt.where(TransactionModel.category_id == criteria.category_id)
        if criteria.date_from is not None:
            stmt = stmt.where(TransactionModel.date >= to_utc(criteria.date_from))
        if criteria.date_to is not None:
            stmt = stmt.where(TransactionModel.date <= to_utc(criteria.date_to))

        result = await self._session.execute(stmt.order_by(*self._list_order()))
        return [self._map_to_domain(model) for model in result.scalars().all()]

    def _list_order(self) -> tuple[Any, ...]:
        return (TransactionModel.date.desc(), TransactionModel.created_at.desc())

    def _columns_from_domain(self, entity: Transaction) -> dict[str, Any]:
        return {
            "amount": entity.amount,
            "date": to_utc(entity.date),
            "account_id": entity.account_id,
            "category_id": entity.category_id,
            "description": entity.description,
        }

    def _map_to_domain(self, model: TransactionModel) -> Transaction:
        return Transaction(
            amount=model.amount,
            date=ensure_tz_aware(model.date),
            account_id=model.account_id,
            category_id=model.category_id,
            description=model.description,
            **self._common_fields(model),
        )
