"""Data classes shared by the auth services."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded contents of a verified access token."""

    user_id: UUID
    issued_at: datetime
    exp: datetime
