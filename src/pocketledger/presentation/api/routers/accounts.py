"""Accounts router for account management endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from pocketledger.application.services import account_service
from pocketledger.presentation.api.dependencies import RepoFactory
from pocketledger.presentation.api.schemas import (
    AccountRequest,
    AccountResponse,
    ApiResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create account",
    responses={
        201: {"description": "Account created"},
        400: {"description": "Invalid input"},
    },
)
async def create_account(
    request: AccountRequest,
    factory: RepoFactory,
) -> ApiResponse[AccountResponse]:
    """
    Create a new account.

    Account types: CREDIT-CARD, BANK, CASH. The balance is stored as given.
    """
    service = account_service(factory)

    try:
        account = await service.create(request.to_fields())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return ApiResponse(
        status=True,
        message="Account created successfully",
        data=AccountResponse.from_entity(account),
    )


@router.get(
    "",
    summary="List accounts",
    responses={200: {"description": "List of accounts"}},
)
async def list_accounts(factory: RepoFactory) -> ApiResponse[list[AccountResponse]]:
    """List all accounts of the current user, oldest first."""
    accounts = await account_service(factory).list()

    return ApiResponse(
        status=True,
        message="Accounts fetched successfully",
        data=[AccountResponse.from_entity(a) for a in accounts],
    )


@router.get(
    "/{account_id}",
    summary="Get account",
    responses={
        200: {"description": "Account details"},
        404: {"description": "Account not found"},
    },
)
async def get_account(
    account_id: UUID,
    factory: RepoFactory,
) -> ApiResponse[AccountResponse]:
    account = await account_service(factory).get(account_id)

    return ApiResponse(
        status=True,
        message="Account fetched successfully",
        data=AccountResponse.from_entity(account),
    )


@router.put(
    "/{account_id}",
    summary="Replace account",
    responses={
        200: {"description": "Account updated"},
        400: {"description": "Invalid input"},
        404: {"description": "Account not found"},
    },
)
async def update_account(
    account_id: UUID,
    request: AccountRequest,
    factory: RepoFactory,
) -> ApiResponse[AccountResponse]:
    """
    Replace every field of an account.

    Fields left out of the body are validated as missing, not kept.
    """
    service = account_service(factory)

    try:
        account = await service.update(account_id, request.to_fields())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(
        status=True,
        message="Account updated successfully",
        data=AccountResponse.from_entity(account),
    )


@router.delete(
    "/{account_id}",
    summary="Delete account",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Account deleted (soft delete)"},
        404: {"description": "Account not found"},
    },
)
async def delete_account(account_id: UUID, factory: RepoFactory) -> ApiResponse[None]:
    """
    Soft-delete an account.

    The row is kept and hidden from every listing. Deleting twice succeeds.
    """
    service = account_service(factory)

    try:
        await service.remove(account_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(status=True, message="Account deleted successfully")
