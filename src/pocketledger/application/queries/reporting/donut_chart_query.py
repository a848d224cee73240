"""Fetch expense totals per category for the donut chart."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pocketledger.application.dtos.reporting import DonutChartResult, ReportFilter
from pocketledger.application.ports.reporting import ReportingReadPort

if TYPE_CHECKING:
    from pocketledger.application.factories import RepositoryFactory


class DonutChartQuery:
    """Return expense sums grouped by category name."""

    def __init__(self, reporting_read_port: ReportingReadPort):
        self._reporting = reporting_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DonutChartQuery:
        return cls(reporting_read_port=factory.reporting_read_port())

    async def execute(
        self,
        account: Optional[UUID] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> DonutChartResult:
        return await self._reporting.donut_chart(
            ReportFilter(account_id=account, from_date=from_date, to_date=to_date),
        )
