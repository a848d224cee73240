"""User and authentication schemas for API request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from pocketledger.presentation.api.schemas.common import (
    NonBlankStr,
    check_password_bytes,
)

MIN_PASSWORD_LENGTH = 6


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    name: NonBlankStr = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Login email")
    password: str = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="At least 6 characters, at most 72 bytes",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "password": "secret123",
            },
        },
    )

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)


class LoginRequest(BaseModel):
    """Request schema for user login.

    The password is passed on untouched; no length rules apply here so a
    bad password and an unknown email fail the same way.
    """

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "jane@example.com", "password": "secret123"},
        },
    )


class UpdateProfileRequest(BaseModel):
    name: NonBlankStr = Field(..., description="New display name")


class ChangePasswordRequest(BaseModel):
    """Request schema for password change.

    Field names follow the wire format used by existing clients.
    """

    password: str = Field(..., min_length=1, description="Current password")
    newPassword: str = Field(  # NOQA: N815
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="New password (at least 6 characters, at most 72 bytes)",
    )

    @field_validator("newPassword")
    @classmethod
    def new_password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)


class UserSummaryResponse(BaseModel):
    name: str
    email: str


class RegisterResponse(BaseModel):
    """Token plus the public fields of the new user."""

    token: str = Field(..., description="Bearer token")
    name: str
    email: str


class LoginResponse(BaseModel):
    token: str = Field(..., description="Bearer token")
    user: UserSummaryResponse


class ProfileResponse(BaseModel):
    """Public profile; the password hash is never exposed."""

    id: UUID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
