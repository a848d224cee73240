"""API request and response schemas."""

from pocketledger.presentation.api.schemas.common import (
    ApiResponse,
    ErrorResponse,
    FieldErrorResponse,
    HealthResponse,
)
from pocketledger.presentation.api.schemas.ledger import (
    AccountRequest,
    AccountResponse,
    CategoryRequest,
    CategoryResponse,
    TransactionRequest,
    TransactionResponse,
)
from pocketledger.presentation.api.schemas.reports import (
    AreaChartResponse,
    DonutChartResponse,
    InfoCardsResponse,
)
from pocketledger.presentation.api.schemas.user import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    RegisterRequest,
    RegisterResponse,
    UpdateProfileRequest,
    UserSummaryResponse,
)

__all__ = [
    "AccountRequest",
    "AccountResponse",
    "ApiResponse",
    "AreaChartResponse",
    "CategoryRequest",
    "CategoryResponse",
    "ChangePasswordRequest",
    "DonutChartResponse",
    "ErrorResponse",
    "FieldErrorResponse",
    "HealthResponse",
    "InfoCardsResponse",
    "LoginRequest",
    "LoginResponse",
    "ProfileResponse",
    "RegisterRequest",
    "RegisterResponse",
    "TransactionRequest",
    "TransactionResponse",
    "UpdateProfileRequest",
    "UserSummaryResponse",
]
