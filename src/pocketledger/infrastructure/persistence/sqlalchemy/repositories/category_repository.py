"""SQLAlchemy implementation of CategoryRepository."""

from typing import Any

from pocketledger.domain.ledger import Category, CategoryRepository, CategoryType
from pocketledger.infrastructure.persistence.sqlalchemy.models import CategoryModel
from pocketledger.infrastructure.persistence.sqlalchemy.repositories.ledger_repository import (  # NOQA: E501
    LedgerRepositorySQLAlchemy,
)


class CategoryRepositorySQLAlchemy(
    LedgerRepositorySQLAlchemy[Category],
    CategoryRepository,
):
    model_cls = CategoryModel

    def _list_order(self) -> tuple[Any, ...]:
        return (CategoryModel.type.asc(), CategoryModel.name.asc())

    def _columns_from_domain(self, entity: Category) -> dict[str, Any]:
        return {
            "name": entity.name,
            "type": CategoryType(entity.type).value,
        }

    def _map_to_domain(self, model: CategoryModel) -> Category:
        return Category(
            name=model.name,
            type=CategoryType(model.type),
            **self._common_fields(model),
        )
