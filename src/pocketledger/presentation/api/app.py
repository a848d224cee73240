"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from pocketledger.infrastructure.persistence.sqlalchemy.models import Base
from pocketledger.presentation.api.dependencies import get_engine
from pocketledger.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from pocketledger.presentation.api.routers import (
    accounts_router,
    categories_router,
    transactions_router,
    user_router,
)
from pocketledger.presentation.api.schemas import HealthResponse
from pocketledger_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for our packages, and WARNING for noisy third-party libraries.
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("pocketledger").setLevel(log_level)
    logging.getLogger("pocketledger_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "User",
        "description": """Registration, login and profile.

**Security:**
- Passwords are hashed with bcrypt
- Stateless JWT bearer tokens (HS256) with a fixed lifetime
- Unknown email and wrong password are indistinguishable
""",
    },
    {
        "name": "Accounts",
        "description": """Bank accounts, credit cards and cash wallets.

**Account Types:** `CREDIT-CARD`, `BANK`, `CASH`

The balance is whatever you store; transactions never change it.
""",
    },
    {
        "name": "Categories",
        "description": """Income and expense categories.

**Category Types:** `EXPENSE`, `INCOME`

`/chart/donut` sums expense transactions per category.
""",
    },
    {
        "name": "Transactions",
        "description": """Dated amounts booked on an account and a category.

**Reports:**
- `/chart/area` - income and expense per day
- `/info-cards` - income, expense, balance and account totals

All list and report endpoints accept `account`, `fromDate` and `toDate`;
both day bounds are inclusive (UTC).
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting PocketLedger API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down PocketLedger API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(user_router, prefix="/user", tags=["User"])
    v1_router.include_router(accounts_router, prefix="/account", tags=["Accounts"])
    v1_router.include_router(
        categories_router,
        prefix="/category",
        tags=["Categories"],
    )
    v1_router.include_router(
        transactions_router,
        prefix="/transaction",
        tags=["Transactions"],
    )

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description="Personal finance tracking: accounts, categories, "
        "transactions and spending reports.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers for the shared response envelope
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers and monitoring."""
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            api_versions=["v1"],
        )

    # Root endpoint with API info
    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "user": f"{API_V1_PREFIX}/user",
                "accounts": f"{API_V1_PREFIX}/account",
                "categories": f"{API_V1_PREFIX}/category",
                "transactions": f"{API_V1_PREFIX}/transaction",
            },
        }

    return app
