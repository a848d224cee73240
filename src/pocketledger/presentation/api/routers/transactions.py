"""Transactions router: transaction CRUD, area chart and info cards."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from pocketledger.application.queries import AreaChartQuery, InfoCardsQuery
from pocketledger.application.services import transaction_service
from pocketledger.domain.ledger import TransactionFilter
from pocketledger.domain.shared.time import end_of_day, start_of_day
from pocketledger.presentation.api.dependencies import RepoFactory
from pocketledger.presentation.api.routers.filters import (
    AccountFilter,
    CategoryFilter,
    FromDateFilter,
    ToDateFilter,
)
from pocketledger.presentation.api.schemas import (
    ApiResponse,
    AreaChartResponse,
    InfoCardsResponse,
    TransactionRequest,
    TransactionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create transaction",
    responses={
        201: {"description": "Transaction created"},
        400: {"description": "Invalid input or unknown account/category"},
    },
)
async def create_transaction(
    request: TransactionRequest,
    factory: RepoFactory,
) -> ApiResponse[TransactionResponse]:
    """
    Book a transaction against one of your accounts and categories.

    Account balances are not adjusted.
    """
    service = transaction_service(factory)

    try:
        txn = await service.create(request.to_fields())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(
        status=True,
        message="Transaction created successfully",
        data=TransactionResponse.from_entity(txn),
    )


@router.get(
    "",
    summary="List transactions",
    responses={200: {"description": "Transactions, newest first"}},
)
async def list_transactions(
    factory: RepoFactory,
    account: AccountFilter = None,
    category: CategoryFilter = None,
    from_date: FromDateFilter = None,
    to_date: ToDateFilter = None,
) -> ApiResponse[list[TransactionResponse]]:
    """List transactions, optionally narrowed by account, category and days."""
    criteria = TransactionFilter(
        account_id=account,
        category_id=category,
        date_from=start_of_day(from_date) if from_date else None,
        date_to=end_of_day(to_date) if to_date else None,
    )
    transactions = await transaction_service(factory).list_filtered(criteria)

    return ApiResponse(
        status=True,
        message="Transactions fetched successfully",
        data=[TransactionResponse.from_entity(t) for t in transactions],
    )


# Report routes are registered before /{transaction_id}
@router.get(
    "/chart/area",
    summary="Income and expense per day",
    responses={200: {"description": "Labels and series for an area chart"}},
)
async def area_chart(
    factory: RepoFactory,
    account: AccountFilter = None,
    from_date: FromDateFilter = None,
    to_date: ToDateFilter = None,
) -> ApiResponse[AreaChartResponse]:
    """
    Daily income and expense totals.

    Only days with at least one matching transaction are returned.
    """
    query = AreaChartQuery.from_factory(factory)
    result = await query.execute(
        account=account,
        from_date=from_date,
        to_date=to_date,
    )

    return ApiResponse(
        status=True,
        message="Transactions fetched successfully",
        data=AreaChartResponse(
            labels=result.labels,
            income=result.income,
            expense=result.expense,
        ),
    )


@router.get(
    "/info-cards",
    summary="Summary totals",
    responses={200: {"description": "Income, expense and balance totals"}},
)
async def info_cards(
    factory: RepoFactory,
    account: AccountFilter = None,
    from_date: FromDateFilter = None,
    to_date: ToDateFilter = None,
) -> ApiResponse[InfoCardsResponse]:
    query = InfoCardsQuery.from_factory(factory)
    result = await query.execute(
        account=account,
        from_date=from_date,
        to_date=to_date,
    )

    return ApiResponse(
        status=True,
        message="Info cards fetched successfully",
        data=InfoCardsResponse(
            income=result.income,
            expense=result.expense,
            balance=result.balance,
            accounts_balance=result.accounts_balance,
            transactions_count=result.transactions_count,
        ),
    )


@router.get(
    "/{transaction_id}",
    summary="Get transaction",
    responses={
        200: {"description": "Transaction details"},
        404: {"description": "Transaction not found"},
    },
)
async def get_transaction(
    transaction_id: UUID,
    factory: RepoFactory,
) -> ApiResponse[TransactionResponse]:
    txn = await transaction_service(factory).get(transaction_id)

    return ApiResponse(
        status=True,
        message="Transaction fetched successfully",
        data=TransactionResponse.from_entity(txn),
    )


@router.put(
    "/{transaction_id}",
    summary="Replace transaction",
    responses={
        200: {"description": "Transaction updated"},
        400: {"description": "Invalid input or unknown account/category"},
        404: {"description": "Transaction not found"},
    },
)
async def update_transaction(
    transaction_id: UUID,
    request: TransactionRequest,
    factory: RepoFactory,
) -> ApiResponse[TransactionResponse]:
    """
    Replace every field of a transaction.

    An omitted description is cleared.
    """
    service = transaction_service(factory)

    try:
        txn = await service.update(transaction_id, request.to_fields())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(
        status=True,
        message="Transaction updated successfully",
        data=TransactionResponse.from_entity(txn),
    )


@router.delete(
    "/{transaction_id}",
    summary="Delete transaction",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Transaction deleted (soft delete)"},
        404: {"description": "Transaction not found"},
    },
)
async def delete_transaction(
    transaction_id: UUID,
    factory: RepoFactory,
) -> ApiResponse[None]:
    service = transaction_service(factory)

    try:
        await service.remove(transaction_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(status=True, message="Transaction deleted successfully")
