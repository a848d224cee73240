"""SQLAlchemy model for user accounts (bank, credit card, cash)."""

from uuid import UUID

from sqlalchemy import Float, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pocketledger.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
)


class AccountModel(Base, TimestampMixin, SoftDeleteMixin):
    """Database model for accounts."""

    __tablename__ = "accounts"

    __table_args__ = (
        # Composite index for user-scoped queries
        Index("ix_accounts_user_deleted", "user_id", "is_deleted"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    balance: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, name={self.name}, type={self.type})>"
