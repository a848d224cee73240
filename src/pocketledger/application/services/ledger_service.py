"""Generic CRUD for user-owned ledger entities.

One ``LedgerService`` serves Accounts, Categories and Transactions. The
entity class supplies the set of mutable fields; the lifecycle rules are
shared:

- create: persist for the current user with ``is_deleted=False``
- list / get: owner scoped, soft-deleted rows hidden
- update: owner scoped, soft-deleted rows hidden, every mutable field replaced
- remove: owner scoped only, sets ``is_deleted`` (repeat calls succeed)

Field values arrive already typed and validated by the request schemas.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any, Generic, Optional
from uuid import UUID

from pocketledger.domain.ledger import (
    Account,
    Category,
    LedgerEntityNotFoundError,
    LedgerRepository,
    Transaction,
    TransactionFilter,
    TransactionRepository,
)
from pocketledger.domain.ledger.repositories import EntityT
from pocketledger.domain.shared.exceptions import ValidationError, Violation

if TYPE_CHECKING:
    from pocketledger.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

ReferenceCheck = Callable[[dict[str, Any]], Awaitable[None]]


class LedgerService(Generic[EntityT]):
    """Create, list, get, update and soft-delete one kind of ledger entity."""

    def __init__(
        self,
        repository: LedgerRepository[EntityT],
        entity_cls: type[EntityT],
        user_id: UUID,
        reference_check: Optional[ReferenceCheck] = None,
    ):
        self._repo = repository
        self._entity_cls = entity_cls
        self._user_id = user_id
        self._reference_check = reference_check

    @property
    def entity_name(self) -> str:
        return self._entity_cls.ENTITY_NAME

    async def create(self, data: Mapping[str, Any]) -> EntityT:
        fields = await self._fields(data)
        entity = self._entity_cls(user_id=self._user_id, **fields)
        await self._repo.save(entity)

        logger.info("%s created: %s", self.entity_name, entity.id)
        return entity

    async def list(self) -> list[EntityT]:
        return await self._repo.find_all()

    async def get(self, entity_id: UUID) -> EntityT:
        return await self._get_visible(entity_id)

    async def update(self, entity_id: UUID, data: Mapping[str, Any]) -> EntityT:
        entity = await self._get_visible(entity_id)
        fields = await self._fields(data)

        entity.replace_fields(fields)
        await self._repo.save(entity)

        logger.info("%s updated: %s", self.entity_name, entity.id)
        return entity

    async def remove(self, entity_id: UUID) -> None:
        entity = await self._repo.find_by_id(entity_id, include_deleted=True)
        if entity is None:
            raise LedgerEntityNotFoundError(self.entity_name, entity_id)

        if not entity.is_deleted:
            entity.mark_deleted()
            await self._repo.save(entity)

        logger.info("%s deleted: %s", self.entity_name, entity_id)

    async def _get_visible(self, entity_id: UUID) -> EntityT:
        entity = await self._repo.find_by_id(entity_id)
        if entity is None:
            raise LedgerEntityNotFoundError(self.entity_name, entity_id)
        return entity

    async def _fields(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Every mutable field of the entity; keys absent from ``data`` are None."""
        fields = {name: data.get(name) for name in self._entity_cls.MUTABLE_FIELDS}
        if self._reference_check is not None:
            await self._reference_check(fields)
        return fields


class TransactionService(LedgerService[Transaction]):
    """LedgerService for transactions, with reference checks and list filters."""

    def __init__(
        self,
        repository: TransactionRepository,
        account_repository: LedgerRepository[Account],
        category_repository: LedgerRepository[Category],
        user_id: UUID,
    ):
        super().__init__(
            repository=repository,
            entity_cls=Transaction,
            user_id=user_id,
            reference_check=self._check_references,
        )
        self._transactions = repository
        self._accounts = account_repository
        self._categories = category_repository

    async def list_filtered(self, criteria: TransactionFilter) -> list[Transaction]:
        return await self._transactions.find_filtered(criteria)

    async def _check_references(self, fields: dict[str, Any]) -> None:
        """Account and category must be live records of the same user."""
        violations: list[Violation] = []
        if await self._accounts.find_by_id(fields["account_id"]) is None:
            violations.append(Violation("account", "Account not found"))
        if await self._categories.find_by_id(fields["category_id"]) is None:
            violations.append(Violation("category", "Category not found"))
        if violations:
            raise ValidationError(violations)


def account_service(factory: RepositoryFactory) -> LedgerService[Account]:
    return LedgerService(
        repository=factory.account_repository(),
        entity_cls=Account,
        user_id=factory.user_context.user_id,
    )


def category_service(factory: RepositoryFactory) -> LedgerService[Category]:
    return LedgerService(
        repository=factory.category_repository(),
        entity_cls=Category,
        user_id=factory.user_context.user_id,
    )


def transaction_service(factory: RepositoryFactory) -> TransactionService:
    return TransactionService(
        repository=factory.transaction_repository(),
        account_repository=factory.account_repository(),
        category_repository=factory.category_repository(),
        user_id=factory.user_context.user_id,
    )
