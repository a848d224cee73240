"""Fetch daily income/expense totals for the area chart."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pocketledger.application.dtos.reporting import AreaChartResult, ReportFilter
from pocketledger.application.ports.reporting import ReportingReadPort

if TYPE_CHECKING:
    from pocketledger.application.factories import RepositoryFactory


class AreaChartQuery:
    """Return income and expense sums per calendar day."""

    def __init__(self, reporting_read_port: ReportingReadPort):
        self._reporting = reporting_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AreaChartQuery:
        return cls(reporting_read_port=factory.reporting_read_port())

    async def execute(
        self,
        account: Optional[UUID] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> AreaChartResult:
        return await self._reporting.area_chart(
            ReportFilter(account_id=account, from_date=from_date, to_date=to_date),
        )
