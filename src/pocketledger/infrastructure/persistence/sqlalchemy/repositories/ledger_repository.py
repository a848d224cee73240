"""Shared SQLAlchemy implementation for user-scoped ledger repositories."""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Optional
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from pocketledger.domain.ledger.repositories import EntityT, LedgerRepository
from pocketledger.domain.shared.time import ensure_tz_aware

if TYPE_CHECKING:
    from pocketledger.application.context import UserContext

logger = logging.getLogger(__name__)


class LedgerRepositorySQLAlchemy(LedgerRepository[EntityT], Generic[EntityT]):
    """Base class: owner scoping, soft-delete visibility and upsert.

    Subclasses set ``model_cls`` and provide the column mapping.
    """

    model_cls: ClassVar[Any]

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def save(self, entity: EntityT) -> None:
        model = await self._find_model_by_id(entity.id, include_deleted=True)

        if model:
            logger.debug("Updating %s: %s", self.model_cls.__tablename__, entity.id)
            self._update_model_from_domain(model, entity)
        else:
            logger.debug("Creating %s: %s", self.model_cls.__tablename__, entity.id)
            model = self._create_model_from_domain(entity)
            self._session.add(model)

        await self._session.flush()

    async def find_by_id(
        self,
        entity_id: UUID,
        include_deleted: bool = False,
    ) -> Optional[EntityT]:
        model = await self._find_model_by_id(entity_id, include_deleted)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_all(self) -> list[EntityT]:
        stmt = self._visible().order_by(*self._list_order())
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    def _owned(self) -> Select:
        return select(self.model_cls).where(self.model_cls.user_id == self._user_id)

    def _visible(self) -> Select:
        return self._owned().where(self.model_cls.is_deleted.is_(False))

    async def _find_model_by_id(
        self,
        entity_id: UUID,
        include_deleted: bool = False,
    ) -> Optional[Any]:
        base = self._owned() if include_deleted else self._visible()
        stmt = base.where(self.model_cls.id == entity_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _create_model_from_domain(self, entity: EntityT) -> Any:
        return self.model_cls(
            id=entity.id,
            user_id=self._user_id,
            is_deleted=entity.is_deleted,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            **self._columns_from_domain(entity),
        )

    def _update_model_from_domain(self, model: Any, entity: EntityT) -> None:
        for column, value in self._columns_from_domain(entity).items():
            setattr(model, column, value)
        model.is_deleted = entity.is_deleted
        model.updated_at = entity.updated_at

    def _common_fields(self, model: Any) -> dict[str, Any]:
        return {
            "id": model.id,
            "user_id": model.user_id,
            "is_deleted": model.is_deleted,
            "created_at": ensure_tz_aware(model.created_at),
            "updated_at": ensure_tz_aware(model.updated_at),
        }

    def _list_order(self) -> tuple[Any, ...]:
        return (self.model_cls.created_at.asc(),)

    @abstractmethod
    def _columns_from_domain(self, entity: EntityT) -> dict[str, Any]:
        """Entity-specific column values."""

    @abstractmethod
    def _map_to_domain(self, model: Any) -> EntityT:
        """Build the domain entity from a row."""
