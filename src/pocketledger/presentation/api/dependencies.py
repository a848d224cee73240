"""FastAPI dependency injection for the PocketLedger API.

Provides dependencies for:
- Database sessions
- Authentication (current user identity from JWT)
- User context for repository scoping
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pocketledger.application.context import UserContext
from pocketledger.application.services import UserAccountService
from pocketledger.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)
from pocketledger_auth import (
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenExpiredError,
)
from pocketledger_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """Get database URL from application settings."""
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    One session per request; routers commit or roll back.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_settings),
) -> JWTService:
    """Get JWT service configured with application settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_settings),
) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


async def get_user_account_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> UserAccountService:
    """
    Get user account service with all dependencies.

    This service orchestrates registration, login, profile and password changes.
    """
    return UserAccountService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected user account service
AccountService = Annotated[UserAccountService, Depends(get_user_account_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_user_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserContext:
    """
    FastAPI dependency resolving the caller's identity from the bearer token.

    Only the token is checked; the user row is not loaded here, so
    operations that need it report a missing user themselves.

    Parameters
    ----------
    credentials
        Bearer token from Authorization header
    jwt_service
        JWT service for token verification

    Returns
    -------
    UserContext scoped to the token subject

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, or expired
    """
    if credentials is None:
        logger.info("Request without bearer token rejected")
        raise _unauthorized()

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except TokenExpiredError as e:
        logger.info("Expired token rejected: %s", e)
        raise _unauthorized() from e
    except InvalidTokenError as e:
        logger.warning("Invalid token rejected: %s", e)
        raise _unauthorized() from e

    return UserContext.from_user_id(payload.user_id)


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


# -----------------------------------------------------------------------------
# Repository Factory
# -----------------------------------------------------------------------------


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    user_context: UserContext = Depends(get_user_context),
) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory for the current user.

    The factory creates user-scoped repositories for domain operations.
    """
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Application Queries & Services
# -----------------------------------------------------------------------------
# Ledger services and reporting queries are built from the factory inside the
# routers, e.g. ``account_service(factory)`` or
# ``DonutChartQuery.from_factory(factory)``.
