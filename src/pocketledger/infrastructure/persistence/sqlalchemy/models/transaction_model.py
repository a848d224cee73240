"""SQLAlchemy model for transactions."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import DateTime, Float, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pocketledger.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
)


class TransactionModel(Base, TimestampMixin, SoftDeleteMixin):
    """Database model for transactions."""

    __tablename__ = "transactions"

    __table_args__ = (
        # Index for user-scoped queries
        Index("ix_transactions_user_deleted", "user_id", "is_deleted"),
        Index("ix_transactions_user_date", "user_id", "date"),
        Index("ix_transactions_category", "category_id"),
        Index("ix_transactions_account", "account_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    account_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id"),
        nullable=False,
    )
    category_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("categories.id"),
        nullable=False,
    )

    amount: Mapped[float] = mapped_column(Float, nullable=False)
    # Stored in UTC
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, amount={self.amount}, date={self.date})>"
        )
