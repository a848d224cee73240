"""Reporting DTOs.

Inputs (ReportFilter) and outputs of the chart and info-card reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pocketledger.domain.shared.time import end_of_day, start_of_day


@dataclass(frozen=True)
class ReportFilter:
    """Common filters shared by all reports.

    Day bounds are inclusive: ``from_date`` starts at 00:00 and ``to_date``
    ends at the last instant of that calendar day (UTC).
    """

    account_id: Optional[UUID] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None

    @property
    def start(self) -> Optional[datetime]:
        return start_of_day(self.from_date) if self.from_date else None

    @property
    def end(self) -> Optional[datetime]:
        return end_of_day(self.to_date) if self.to_date else None


@dataclass
class DonutChartResult:
    """Expense totals per category name, as parallel lists."""

    labels: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)


@dataclass
class AreaChartResult:
    """Daily income and expense totals, as parallel lists."""

    labels: list[str] = field(default_factory=list)
    income: list[float] = field(default_factory=list)
    expense: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class InfoCardsResult:
    income: float
    expense: float
    balance: float
    accounts_balance: float
    transactions_count: int
