"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from pocketledger.infrastructure.persistence.sqlalchemy.adapters.reporting import (
    SqlAlchemyReportingReadAdapter,
)
from pocketledger.infrastructure.persistence.sqlalchemy.repositories.account_repository import (  # NOQA: E501
    AccountRepositorySQLAlchemy,
)
from pocketledger.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from pocketledger.infrastructure.persistence.sqlalchemy.repositories.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from pocketledger.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._account_repo: AccountRepositorySQLAlchemy | None = None
        self._category_repo: CategoryRepositorySQLAlchemy | None = None
        self._transaction_repo: TransactionRepositorySQLAlchemy | None = None
        self._reporting_read_adapter: SqlAlchemyReportingReadAdapter | None = None

    @property
    def user_context(self) -> UserContext:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def account_repository(self) -> AccountRepositorySQLAlchemy:
        if self._account_repo is None:
            self._account_repo = AccountRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._account_repo

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._category_repo

    def transaction_repository(self) -> TransactionRepositorySQLAlchemy:
        if self._transaction_repo is None:
            self._transaction_repo = TransactionRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._transaction_repo

    def reporting_read_port(self) -> SqlAlchemyReportingReadAdapter:
        if self._reporting_read_adapter is None:
            self._reporting_read_adapter = SqlAlchemyReportingReadAdapter(
                self._session,
                self._user_context,
            )
        return self._reporting_read_adapter
