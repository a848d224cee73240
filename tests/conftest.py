"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, no database)
    │   ├── pocketledger_auth/
    │   ├── domain/
    │   └── application/
    └── integration/       # Tests against a throwaway SQLite database
        ├── persistence/   # Repositories and read adapters
        └── api/           # FastAPI TestClient

Settings require JWT_SECRET_KEY; a test value is provided here so that
modules reading settings at import time work without a config/.env file.
"""

import os

import pytest

os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from pocketledger_config import clear_settings_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so every test sees the environment it sets up."""
    clear_settings_cache()
    yield
    clear_settings_cache()
