"""REST API presentation layer for PocketLedger.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain errors -> response envelope
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from pocketledger.presentation.api.app import create_app

__all__ = ["create_app"]
