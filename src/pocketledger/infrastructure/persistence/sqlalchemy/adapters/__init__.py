"""SQLAlchemy adapters - implementations of application ports."""

from pocketledger.infrastructure.persistence.sqlalchemy.adapters.reporting import (
    SqlAlchemyReportingReadAdapter,
)

__all__ = ["SqlAlchemyReportingReadAdapter"]
