"""Categories router: category CRUD and the expense donut chart."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from pocketledger.application.queries import DonutChartQuery
from pocketledger.application.services import category_service
from pocketledger.presentation.api.dependencies import RepoFactory
from pocketledger.presentation.api.routers.filters import (
    AccountFilter,
    FromDateFilter,
    ToDateFilter,
)
from pocketledger.presentation.api.schemas import (
    ApiResponse,
    CategoryRequest,
    CategoryResponse,
    DonutChartResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    responses={
        201: {"description": "Category created"},
        400: {"description": "Invalid input"},
    },
)
async def create_category(
    request: CategoryRequest,
    factory: RepoFactory,
) -> ApiResponse[CategoryResponse]:
    """Create a new EXPENSE or INCOME category."""
    service = category_service(factory)

    try:
        category = await service.create(request.to_fields())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(
        status=True,
        message="Category created successfully",
        data=CategoryResponse.from_entity(category),
    )


@router.get(
    "",
    summary="List categories",
    responses={200: {"description": "Categories sorted by type"}},
)
async def list_categories(
    factory: RepoFactory,
) -> ApiResponse[list[CategoryResponse]]:
    categories = await category_service(factory).list()

    return ApiResponse(
        status=True,
        message="Categories fetched successfully",
        data=[CategoryResponse.from_entity(c) for c in categories],
    )


# Registered before /{category_id} so "chart" is not parsed as an id
@router.get(
    "/chart/donut",
    summary="Expense by category",
    responses={200: {"description": "Labels and values for a donut chart"}},
)
async def donut_chart(
    factory: RepoFactory,
    account: AccountFilter = None,
    from_date: FromDateFilter = None,
    to_date: ToDateFilter = None,
) -> ApiResponse[DonutChartResponse]:
    """
    Sum expense transactions per category name.

    Both day bounds are inclusive. Categories without matching
    transactions are left out.
    """
    query = DonutChartQuery.from_factory(factory)
    result = await query.execute(
        account=account,
        from_date=from_date,
        to_date=to_date,
    )

    return ApiResponse(
        status=True,
        message="Categories fetched successfully",
        data=DonutChartResponse(labels=result.labels, values=result.values),
    )


@router.get(
    "/{category_id}",
    summary="Get category",
    responses={
        200: {"description": "Category details"},
        404: {"description": "Category not found"},
    },
)
async def get_category(
    category_id: UUID,
    factory: RepoFactory,
) -> ApiResponse[CategoryResponse]:
    category = await category_service(factory).get(category_id)

    return ApiResponse(
        status=True,
        message="Category fetched successfully",
        data=CategoryResponse.from_entity(category),
    )


@router.put(
    "/{category_id}",
    summary="Replace category",
    responses={
        200: {"description": "Category updated"},
        400: {"description": "Invalid input"},
        404: {"description": "Category not found"},
    },
)
async def update_category(
    category_id: UUID,
    request: CategoryRequest,
    factory: RepoFactory,
) -> ApiResponse[CategoryResponse]:
    service = category_service(factory)

    try:
        category = await service.update(category_id, request.to_fields())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(
        status=True,
        message="Category updated successfully",
        data=CategoryResponse.from_entity(category),
    )


@router.delete(
    "/{category_id}",
    summary="Delete category",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Category deleted (soft delete)"},
        404: {"description": "Category not found"},
    },
)
async def delete_category(
    category_id: UUID,
    factory: RepoFactory,
) -> ApiResponse[None]:
    service = category_service(factory)

    try:
        await service.remove(category_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(status=True, message="Category deleted successfully")
