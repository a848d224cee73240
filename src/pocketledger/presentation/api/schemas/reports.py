"""Chart and summary schemas for reporting endpoints."""

from pydantic import BaseModel, Field


class DonutChartResponse(BaseModel):
    """Expense per category, as parallel lists."""

    labels: list[str] = Field(..., description="Category names")
    values: list[float] = Field(..., description="Summed amounts per category")


class AreaChartResponse(BaseModel):
    """Income and expense per day, as parallel lists."""

    labels: list[str] = Field(..., description="Calendar days (YYYY-MM-DD, UTC)")
    income: list[float] = Field(..., description="Income per day")
    expense: list[float] = Field(..., description="Expense per day")


class InfoCardsResponse(BaseModel):
    income: float = Field(..., description="Sum of INCOME transactions")
    expense: float = Field(..., description="Sum of EXPENSE transactions")
    balance: float = Field(..., description="income - expense")
    accounts_balance: float = Field(..., description="Sum of stored account balances")
    transactions_count: int = Field(..., description="Matching transactions")
