"""User router: registration, login, profile and password change."""

import logging

from fastapi import APIRouter, status

from pocketledger.presentation.api.dependencies import (
    AccountService,
    CurrentUserContext,
    DBSession,
)
from pocketledger.presentation.api.schemas import (
    ApiResponse,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    RegisterRequest,
    RegisterResponse,
    UpdateProfileRequest,
    UserSummaryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/auth/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User created, token issued"},
        400: {"description": "Invalid input or email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    service: AccountService,
    session: DBSession,
) -> ApiResponse[RegisterResponse]:
    """
    Register a new user account.

    Returns a bearer token so the client is logged in right away.
    """
    try:
        result = await service.register(
            name=request.name,
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return ApiResponse(
        status=True,
        message="User created successfully",
        data=RegisterResponse(
            token=result.token,
            name=result.user.name,
            email=result.user.email,
        ),
    )


@router.post(
    "/auth/login",
    summary="Login with email and password",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Invalid email or password"},
    },
)
async def login(
    request: LoginRequest,
    service: AccountService,
) -> ApiResponse[LoginResponse]:
    """
    Authenticate and obtain a bearer token.

    Unknown email and wrong password produce the same response.
    """
    result = await service.login(email=request.email, password=request.password)

    return ApiResponse(
        status=True,
        message="User logged in successfully",
        data=LoginResponse(
            token=result.token,
            user=UserSummaryResponse(name=result.user.name, email=result.user.email),
        ),
    )


@router.get(
    "",
    summary="Get current user profile",
    responses={
        200: {"description": "Profile of the authenticated user"},
        401: {"description": "Not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def get_profile(
    user_context: CurrentUserContext,
    service: AccountService,
) -> ApiResponse[ProfileResponse]:
    profile = await service.get_profile(user_context.user_id)

    return ApiResponse(
        status=True,
        message="User retrieved successfully",
        data=ProfileResponse(
            id=profile.id,
            name=profile.name,
            email=profile.email,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        ),
    )


@router.put(
    "",
    summary="Update current user profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid input"},
        401: {"description": "Not authenticated"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    user_context: CurrentUserContext,
    service: AccountService,
    session: DBSession,
) -> ApiResponse[UserSummaryResponse]:
    try:
        profile = await service.update_profile(
            user_context.user_id,
            name=request.name,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return ApiResponse(
        status=True,
        message="User updated successfully",
        data=UserSummaryResponse(name=profile.name, email=profile.email),
    )


@router.put(
    "/change-password",
    summary="Change password",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Password changed"},
        400: {"description": "Current password is wrong or new one is invalid"},
        401: {"description": "Not authenticated"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    user_context: CurrentUserContext,
    service: AccountService,
    session: DBSession,
) -> ApiResponse[None]:
    """
    Change the password of the authenticated user.

    The current password must be supplied; on failure the stored hash is kept.
    """
    try:
        await service.change_password(
            user_context.user_id,
            current_password=request.password,
            new_password=request.newPassword,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return ApiResponse(status=True, message="Password updated successfully")
