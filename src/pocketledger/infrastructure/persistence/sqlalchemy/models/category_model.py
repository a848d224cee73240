"""SQLAlchemy model for income/expense categories."""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pocketledger.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
)


class CategoryModel(Base, TimestampMixin, SoftDeleteMixin):
    """Database model for categories."""

    __tablename__ = "categories"

    __table_args__ = (
        Index("ix_categories_user_deleted", "user_id", "is_deleted"),
        Index("ix_categories_user_type", "user_id", "type"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name={self.name}, type={self.type})>"
