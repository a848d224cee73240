from pocketledger.application.queries.reporting.area_chart_query import AreaChartQuery
from pocketledger.application.queries.reporting.donut_chart_query import (
    DonutChartQuery,
)
from pocketledger.application.queries.reporting.info_cards_query import InfoCardsQuery

__all__ = [
    "AreaChartQuery",
    "DonutChartQuery",
    "InfoCardsQuery",
]
