"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pocketledger.domain.shared.time import ensure_tz_aware
from pocketledger.domain.user import User, UserRepository
from pocketledger.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> Optional[User]:
        # Exact match: emails are compared as stored
        stmt = select(UserModel).where(
            UserModel.email == email,
            UserModel.is_deleted.is_(False),
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id, include_deleted=True)

        if existing:
            existing.name = user.name
            existing.email = user.email
            existing.password_hash = user.password_hash
            existing.is_deleted = user.is_deleted
            existing.updated_at = user.updated_at
            logger.debug("Updated user: %s", user.id)
        else:
            self._session.add(self._map_to_model(user))
            logger.info("Created user: %s", user.id)

        await self._session.flush()

    async def _find_model_by_id(
        self,
        user_id: UUID,
        include_deleted: bool = False,
    ) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        if not include_deleted:
            stmt = stmt.where(UserModel.is_deleted.is_(False))
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            is_deleted=model.is_deleted,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            is_deleted=user.is_deleted,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
