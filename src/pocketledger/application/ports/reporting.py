"""Read port for report aggregations.

Keeps the application layer independent of how the storage backend
groups and sums rows.
"""

from abc import ABC, abstractmethod

from pocketledger.application.dtos.reporting import (
    AreaChartResult,
    DonutChartResult,
    InfoCardsResult,
    ReportFilter,
)


class ReportingReadPort(ABC):
    """User-scoped aggregations over transactions, categories and accounts."""

    @abstractmethod
    async def donut_chart(self, criteria: ReportFilter) -> DonutChartResult:
        """Expense sum per category name."""

    @abstractmethod
    async def area_chart(self, criteria: ReportFilter) -> AreaChartResult:
        """Income and expense sums per calendar day."""

    @abstractmethod
    async def info_cards(self, criteria: ReportFilter) -> InfoCardsResult:
        """Summary totals."""
