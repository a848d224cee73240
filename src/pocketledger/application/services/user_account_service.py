"""User account service: registration, login, profile and password."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from pocketledger.application.dtos.user import AuthResultDTO, UserProfileDTO
from pocketledger.domain.user import (
    DuplicateUserError,
    InvalidCredentialsError,
    User,
    UserNotFoundError,
)
from pocketledger_auth import JWTService, PasswordHashingService

if TYPE_CHECKING:
    from pocketledger.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserAccountService:
    """
    Application service for user accounts.

    Orchestrates pocketledger_auth infrastructure (password hashing, JWT
    tokens) with the User aggregate to provide:
    - User registration
    - Login with password
    - Profile fetch and update
    - Password change
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(self, name: str, email: str, password: str) -> AuthResultDTO:
        # Not atomic: two concurrent registrations can both pass this check.
        existing_user = await self._user_repo.find_by_email(email)
        if existing_user is not None:
            raise DuplicateUserError(email)

        password_hash = self._password_service.hash(password)
        user = User.create(
            name=name,
            email=email,
            password_hash=password_hash,
        )
        await self._user_repo.save(user)

        token = self._jwt_service.create_access_token(user_id=user.id)

        logger.info("User registered: %s", user.id)
        return AuthResultDTO(token=token, user=UserProfileDTO.from_user(user))

    async def login(self, email: str, password: str) -> AuthResultDTO:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            logger.info("Login failed: wrong password for user %s", user.id)
            raise InvalidCredentialsError

        token = self._jwt_service.create_access_token(user_id=user.id)

        logger.info("User logged in: %s", user.id)
        return AuthResultDTO(token=token, user=UserProfileDTO.from_user(user))

    async def get_profile(self, user_id: UUID) -> UserProfileDTO:
        user = await self._get_user(user_id)
        return UserProfileDTO.from_user(user)

    async def update_profile(
        self,
        user_id: UUID,
        name: str,
    ) -> UserProfileDTO:
        user = await self._get_user(user_id)

        user.rename(name)
        await self._user_repo.save(user)

        logger.info("Profile updated for user: %s", user_id)
        return UserProfileDTO.from_user(user)

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        user = await self._get_user(user_id)

        if not self._password_service.verify(current_password, user.password_hash):
            msg = "Invalid current password"
            raise InvalidCredentialsError(msg)

        user.set_password_hash(self._password_service.hash(new_password))
        await self._user_repo.save(user)

        logger.info("Password changed for user: %s", user_id)

    async def _get_user(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
