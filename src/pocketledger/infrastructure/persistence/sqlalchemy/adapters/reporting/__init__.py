"""SQLAlchemy reporting adapters (read side).

These are infrastructure implementations of application-layer reporting ports.
"""

from pocketledger.infrastructure.persistence.sqlalchemy.adapters.reporting.sqlalchemy_reporting_read_adapter import (  # NOQA: E501
    SqlAlchemyReportingReadAdapter,
)

__all__ = ["SqlAlchemyReportingReadAdapter"]
