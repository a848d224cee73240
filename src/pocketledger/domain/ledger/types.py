"""Enumerations for ledger entities."""

from enum import Enum


class AccountType(str, Enum):
    """Kinds of money containers a user tracks."""

    CREDIT_CARD = "CREDIT-CARD"
    BANK = "BANK"
    CASH = "CASH"


class CategoryType(str, Enum):
    """Direction of money flow for a category."""

    EXPENSE = "EXPENSE"
    INCOME = "INCOME"
