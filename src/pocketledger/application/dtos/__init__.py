from pocketledger.application.dtos.reporting import (
    AreaChartResult,
    DonutChartResult,
    InfoCardsResult,
    ReportFilter,
)
from pocketledger.application.dtos.user import AuthResultDTO, UserProfileDTO

__all__ = [
    "AreaChartResult",
    "AuthResultDTO",
    "DonutChartResult",
    "InfoCardsResult",
    "ReportFilter",
    "UserProfileDTO",
]
