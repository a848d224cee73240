"""Query parameter aliases shared by list and report endpoints."""

from datetime import date
from typing import Annotated, Optional
from uuid import UUID

from fastapi import Query

AccountFilter = Annotated[
    Optional[UUID],
    Query(description="Only transactions booked on this account"),
]
CategoryFilter = Annotated[
    Optional[UUID],
    Query(description="Only transactions in this category"),
]
FromDateFilter = Annotated[
    Optional[date],
    Query(alias="fromDate", description="First day included (YYYY-MM-DD, UTC)"),
]
ToDateFilter = Annotated[
    Optional[date],
    Query(alias="toDate", description="Last day included (YYYY-MM-DD, UTC)"),
]
