"""Fetch summary totals for the dashboard info cards."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pocketledger.application.dtos.reporting import InfoCardsResult, ReportFilter
from pocketledger.application.ports.reporting import ReportingReadPort

if TYPE_CHECKING:
    from pocketledger.application.factories import RepositoryFactory


class InfoCardsQuery:
    def __init__(self, reporting_read_port: ReportingReadPort):
        self._reporting = reporting_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> InfoCardsQuery:
        return cls(reporting_read_port=factory.reporting_read_port())

    async def execute(
        self,
        account: Optional[UUID] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> InfoCardsResult:
        return await self._reporting.info_cards(
            ReportFilter(account_id=account, from_date=from_date, to_date=to_date),
        )
