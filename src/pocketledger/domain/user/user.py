"""User aggregate."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from pocketledger.domain.shared.time import utc_now


class User:
    """
    User aggregate root.

    Holds identity and the bcrypt password hash. The hash never leaves the
    application layer; API responses are built from ``name`` and ``email``.
    Users are never hard-deleted, ``is_deleted`` only hides them from
    email lookups.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        email: str,
        password_hash: str,
        id: Optional[UUID] = None,
        is_deleted: bool = False,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._name = name
        self._email = email
        self._password_hash = password_hash
        self._is_deleted = is_deleted
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @classmethod
    def create(cls, name: str, email: str, password_hash: str) -> "User":
        return cls(name=name, email=email, password_hash=password_hash)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def is_deleted(self) -> bool:
        return self._is_deleted

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, name: str) -> None:
        self._name = name
        self._updated_at = utc_now()

    def set_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email!r})"
