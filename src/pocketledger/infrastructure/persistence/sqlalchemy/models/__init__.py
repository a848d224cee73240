"""SQLAlchemy models for persistence layer."""

from pocketledger.infrastructure.persistence.sqlalchemy.models.account_model import (
    AccountModel,
)
from pocketledger.infrastructure.persistence.sqlalchemy.models.base import Base
from pocketledger.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from pocketledger.infrastructure.persistence.sqlalchemy.models.transaction_model import (  # NOQA: E501
    TransactionModel,
)
from pocketledger.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "AccountModel",
    "CategoryModel",
    "TransactionModel",
    "UserModel",
]
