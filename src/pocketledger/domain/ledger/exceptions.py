"""Ledger domain exceptions."""

from uuid import UUID

from pocketledger.domain.shared.exceptions import EntityNotFoundError


class LedgerEntityNotFoundError(EntityNotFoundError):
    """Raised when an owned record is missing, deleted or owned by someone else."""

    def __init__(self, entity_name: str, entity_id: UUID | str) -> None:
        super().__init__(
            message=f"{entity_name} not found",
            details={"entity": entity_name, "id": str(entity_id)},
        )
        self.entity_name = entity_name
        self.entity_id = entity_id
