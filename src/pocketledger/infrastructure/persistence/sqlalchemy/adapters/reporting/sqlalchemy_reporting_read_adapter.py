"""SQLAlchemy implementation of ReportingReadPort.

Rows are fetched with the shared filters applied in SQL and summed in
Python. Grouping by calendar day would otherwise need strftime on SQLite and
date_trunc on Postgres.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pocketledger.application.dtos.reporting import (
    AreaChartResult,
    DonutChartResult,
    InfoCardsResult,
    ReportFilter,
)
from pocketledger.application.ports.reporting import ReportingReadPort
from pocketledger.domain.ledger.types import CategoryType
from pocketledger.domain.shared.time import to_utc
from pocketledger.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
    CategoryModel,
    TransactionModel,
)

if TYPE_CHECKING:
    from pocketledger.application.context import UserContext


class SqlAlchemyReportingReadAdapter(ReportingReadPort):
    """SQLAlchemy reporting read adapter."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def donut_chart(self, criteria: ReportFilter) -> DonutChartResult:
        stmt = self._filtered(
            select(CategoryModel.name, TransactionModel.amount),
            criteria,
        ).where(CategoryModel.type == CategoryType.EXPENSE.value)

        rows = (await self._session.execute(stmt)).all()

        totals: dict[str, float] = defaultdict(float)
        for category_name, amount in rows:
            totals[category_name] += amount

        # Largest slice first, ties by name for a stable order
        ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
        return DonutChartResult(
            labels=[name for name, _ in ordered],
            values=[value for _, value in ordered],
        )

    async def area_chart(self, criteria: ReportFilter) -> AreaChartResult:
        stmt = self._filtered(
            select(
                TransactionModel.date,
                CategoryModel.type,
                TransactionModel.amount,
            ),
            criteria,
        )

        rows = (await self._session.execute(stmt)).all()

        daily: dict[str, dict[str, float]] = defaultdict(
            lambda: defaultdict(float),
        )
        for txn_date, category_type, amount in rows:
            day_key = to_utc(txn_date).date().isoformat()
            daily[day_key][category_type] += amount

        result = AreaChartResult()
        for day_key in sorted(daily):
            result.labels.append(day_key)
            result.income.append(daily[day_key][CategoryType.INCOME.value])
            result.expense.append(daily[day_key][CategoryType.EXPENSE.value])
        return result

    async def info_cards(self, criteria: ReportFilter) -> InfoCardsResult:
        stmt = self._filtered(
            select(CategoryModel.type, TransactionModel.amount),
            criteria,
        )
        rows = (await self._session.execute(stmt)).all()

        income = 0.0
        expense = 0.0
        for category_type, amount in rows:
            if category_type == CategoryType.INCOME.value:
                income += amount
            else:
                expense += amount

        return InfoCardsResult(
            income=income,
            expense=expense,
            balance=income - expense,
            accounts_balance=await self._accounts_balance(criteria),
            transactions_count=len(rows),
        )

    async def _accounts_balance(self, criteria: ReportFilter) -> float:
        stmt = select(func.coalesce(func.sum(AccountModel.balance), 0.0)).where(
            AccountModel.user_id == self._user_id,
            AccountModel.is_deleted.is_(False),
        )
        if criteria.account_id is not None:
            stmt = stmt.where(AccountModel.id == criteria.account_id)

        total = (await self._session.execute(stmt)).scalar_one()
        return float(total)

    def _filtered(self, stmt: Select, criteria: ReportFilter) -> Select:
        """Owner scope, soft-delete flags and the optional report filters."""
        stmt = stmt.select_from(TransactionModel).join(
            CategoryModel,
            CategoryModel.id == TransactionModel.category_id,
        ).where(
            TransactionModel.user_id == self._user_id,
            TransactionModel.is_deleted.is_(False),
            CategoryModel.user_id == self._user_id,
            CategoryModel.is_deleted.is_(False),
        )
        if criteria.account_id is not None:
            stmt = stmt.where(TransactionModel.account_id == criteria.account_id)
        if criteria.start is not None:
            stmt = stmt.where(TransactionModel.date >= criteria.start)
        if criteria.end is not None:
            stmt = stmt.where(TransactionModel.date <= criteria.end)
        return stmt
