"""Response envelope shared by every endpoint, plus common field types."""

from typing import Annotated, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from pocketledger_auth import PasswordHashingService

DataT = TypeVar("DataT")

# Names may not be empty or whitespace only; surrounding blanks are dropped
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def check_password_bytes(value: str) -> str:
    """Reject passwords bcrypt cannot hash without truncating."""
    if len(value.encode("utf-8")) > PasswordHashingService.MAX_BYTES:
        msg = f"Password cannot exceed {PasswordHashingService.MAX_BYTES} bytes"
        raise ValueError(msg)
    return value


class FieldErrorResponse(BaseModel):
    """One field-level validation failure."""

    field: str = Field(..., description="Offending request field")
    message: str = Field(..., description="What is wrong with it")


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope returned by every successful request."""

    status: bool = Field(..., description="True on success")
    message: str = Field(..., description="Human-readable outcome")
    data: Optional[DataT] = Field(None, description="Payload, when there is one")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": True,
                "message": "Account fetched successfully",
                "data": {"id": "..."},
            },
        },
    )


class ErrorResponse(BaseModel):
    """Envelope for failed requests, built by the exception handlers."""

    status: bool = Field(False, description="Always false")
    message: str = Field(..., description="Error message")
    errors: Optional[list[FieldErrorResponse]] = Field(
        None,
        description="Field-level problems (validation failures only)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": False,
                "message": "Validation failed",
                "errors": [
                    {"field": "email", "message": "Invalid email address"},
                ],
            },
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    api_versions: list[str] = Field(..., description="Mounted API versions")
