"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from pocketledger.application.ports.reporting import ReportingReadPort
from pocketledger.domain.ledger.repositories import (
    AccountRepository,
    CategoryRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from pocketledger.application.context import UserContext


class RepositoryFactory(Protocol):
    """Protocol for creating user-scoped repositories."""

    @property
    def user_context(self) -> UserContext:
        """Get the current user for repository scoping."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Typed as `Any` so the application layer stays independent of the
        database implementation. The presentation layer commits/rolls back.
        """
        ...

    def account_repository(self) -> AccountRepository:
        """Get account repository."""
        ...

    def category_repository(self) -> CategoryRepository:
        """Get category repository."""
        ...

    def transaction_repository(self) -> TransactionRepository:
        """Get transaction repository."""
        ...

    def reporting_read_port(self) -> ReportingReadPort:
        """Get reporting read port."""
        ...
