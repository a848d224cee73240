from pocketledger.presentation.api.routers.accounts import router as accounts_router
from pocketledger.presentation.api.routers.categories import (
    router as categories_router,
)
from pocketledger.presentation.api.routers.transactions import (
    router as transactions_router,
)
from pocketledger.presentation.api.routers.user import router as user_router

__all__ = [
    "accounts_router",
    "categories_router",
    "transactions_router",
    "user_router",
]
