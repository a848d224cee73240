from pocketledger.application.queries.reporting import (
    AreaChartQuery,
    DonutChartQuery,
    InfoCardsQuery,
)

__all__ = [
    "AreaChartQuery",
    "DonutChartQuery",
    "InfoCardsQuery",
]
